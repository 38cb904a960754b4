# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import math
from pathlib import Path

import joblib
import pytest

from sentimentai.artifacts import load_model, save_model
from sentimentai.exceptions import InferenceError, ModelLoadError
from sentimentai.inference.predictor import SentimentPredictor, load_predictor, threshold_from
from sentimentai.schemas import SentimentInput, sentiment_label

PROBE_TEXTS = [
    "I love this spaghetti.",
    "this was an extremely bad steak",
    "The soup was great!",
    "The burger was cold, never again.",
    "",
]


@pytest.fixture(scope="module")
def predictor(trained_model_path: Path) -> SentimentPredictor:
    return load_predictor(trained_model_path)


def test_positive_scenario(predictor: SentimentPredictor) -> None:
    result = predictor.predict(SentimentInput(text="I love this spaghetti."))
    assert result.predicted_label is True
    assert sentiment_label(result.predicted_label) == "Positive"


def test_negative_scenario(predictor: SentimentPredictor) -> None:
    result = predictor.predict(SentimentInput(text="this was an extremely bad steak"))
    assert result.predicted_label is False
    assert sentiment_label(result.predicted_label) == "Negative"


def test_label_follows_probability_threshold(predictor: SentimentPredictor) -> None:
    for result in predictor.predict_batch([SentimentInput(text=text) for text in PROBE_TEXTS]):
        assert 0.0 <= result.probability <= 1.0
        assert result.predicted_label == (result.probability >= 0.5)
        assert math.isclose(result.probability, 1.0 / (1.0 + math.exp(-result.raw_score)), rel_tol=1e-6)


def test_empty_text_is_deterministic(predictor: SentimentPredictor) -> None:
    first = predictor.predict(SentimentInput(text=""))
    second = predictor.predict(SentimentInput(text=""))
    assert first == second


def test_batch_echoes_inputs_in_order(predictor: SentimentPredictor) -> None:
    inputs = [SentimentInput(text=text) for text in PROBE_TEXTS]
    assert [item.text for item in predictor.predict_batch(inputs)] == PROBE_TEXTS
    assert predictor.predict_batch([]) == []


def test_save_reload_round_trip(predictor: SentimentPredictor, tmp_path: Path) -> None:
    path = save_model(predictor.model, tmp_path / "copy.joblib", metadata=predictor.metadata)
    reloaded = load_predictor(path)
    inputs = [SentimentInput(text=text) for text in PROBE_TEXTS]
    for before, after in zip(predictor.predict_batch(inputs), reloaded.predict_batch(inputs)):
        assert before.predicted_label == after.predicted_label
        assert math.isclose(before.probability, after.probability, abs_tol=1e-12)
    assert reloaded.model_version == predictor.model_version


def test_missing_artifact(tmp_path: Path) -> None:
    with pytest.raises(ModelLoadError, match="not found"):
        load_model(tmp_path / "absent.joblib")


def test_corrupt_artifact(tmp_path: Path) -> None:
    path = tmp_path / "broken.joblib"
    path.write_bytes(b"definitely not a pickle")
    with pytest.raises(ModelLoadError, match="unreadable"):
        load_model(path)


def test_artifact_without_classifier(tmp_path: Path) -> None:
    path = tmp_path / "dict.joblib"
    joblib.dump({"vectorizer": None}, path)
    with pytest.raises(ModelLoadError, match="probabilistic"):
        load_model(path)


def test_library_failure_becomes_inference_error() -> None:
    class Broken:
        classes_ = [0, 1]

        def predict_proba(self, frame):
            raise ValueError("boom")

    with pytest.raises(InferenceError):
        SentimentPredictor(Broken()).predict(SentimentInput(text="anything"))


def test_stored_zero_threshold_is_honoured(predictor: SentimentPredictor) -> None:
    assert threshold_from({"threshold": 0.0}) == 0.0
    assert threshold_from({}) == 0.5
    lenient = SentimentPredictor(predictor.model, metadata={"threshold": 0.0})
    assert lenient.threshold == 0.0
    assert lenient.predict(SentimentInput(text="this was an extremely bad steak")).predicted_label is True
