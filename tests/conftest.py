# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path

import pytest

from sentimentai.config import TrainingConfig
from sentimentai.training.trainer import run_training

FOODS = ("spaghetti", "steak", "pasta", "burger", "soup", "salad")
LIKED = ("love", "adore", "really enjoyed", "liked")
PRAISE = ("great", "delicious", "amazing", "wonderful")
SCORN = ("bad", "horrible", "terrible", "awful")
COMPLAINTS = ("bland", "disgusting", "cold", "greasy")


def review_corpus() -> list[tuple[int, str]]:
    rows: list[tuple[int, str]] = []
    for food in FOODS:
        rows.extend((1, f"I {verb} this {food}.") for verb in LIKED)
        rows.extend((1, f"The {food} was {adj}!") for adj in PRAISE)
        rows.extend((0, f"This was an extremely {adj} {food}") for adj in SCORN)
        rows.extend((0, f"The {food} was {adj}, never again.") for adj in COMPLAINTS)
    return rows


def write_corpus(path: Path, *, label_first: bool = True, delimiter: str = "\t") -> Path:
    lines = []
    for label, text in review_corpus():
        lines.append(f"{label}{delimiter}{text}" if label_first else f"{text}{delimiter}{label}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def corpus_path(tmp_path: Path) -> Path:
    return write_corpus(tmp_path / "reviews.txt")


@pytest.fixture(scope="session")
def trained_model_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    root = tmp_path_factory.mktemp("model")
    data_path = write_corpus(root / "reviews.txt")
    report = run_training(TrainingConfig(data_path=data_path, model_path=root / "sentiment_model.joblib"))
    assert report.model_path is not None
    return report.model_path
