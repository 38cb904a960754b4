# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import numpy as np
import pandas as pd

from ..artifacts import load_model
from ..exceptions import InferenceError
from ..features import RAW_TEXT_COLUMN, TEXT_COLUMN, enrich_dataframe
from ..schemas import SentimentInput, SentimentPrediction

DEFAULT_THRESHOLD = 0.5


def threshold_from(metadata: dict[str, Any]) -> float:
    raw = metadata.get("threshold")
    if raw is None:
        return DEFAULT_THRESHOLD
    return float(raw)


class SentimentPredictor:
    def __init__(self, model: Any, *, metadata: dict[str, Any] | None = None, threshold: float | None = None) -> None:
        self.model = model
        self.metadata: dict[str, Any] = dict(metadata or {})
        if threshold is None:
            threshold = threshold_from(self.metadata)
        self.threshold = threshold

    @property
    def model_version(self) -> str:
        return str(self.metadata.get("model_version") or "unknown")

    def _positive_column(self) -> int:
        classes = [int(item) for item in getattr(self.model, "classes_", [0, 1])]
        return classes.index(1) if 1 in classes else len(classes) - 1

    def predict(self, sample: SentimentInput) -> SentimentPrediction:
        return self.predict_batch([sample])[0]

    def predict_batch(self, samples: Sequence[SentimentInput]) -> list[SentimentPrediction]:
        if not samples:
            return []
        frame = enrich_dataframe(pd.DataFrame([{RAW_TEXT_COLUMN: sample.text} for sample in samples]))[[TEXT_COLUMN]]
        try:
            probs = np.asarray(self.model.predict_proba(frame))[:, self._positive_column()]
            if hasattr(self.model, "decision_function"):
                scores = np.ravel(self.model.decision_function(frame))
            else:
                clipped = np.clip(probs, 1e-12, 1 - 1e-12)
                scores = np.log(clipped / (1 - clipped))
        except Exception as exc:
            raise InferenceError(f"Model transform failed for {len(samples)} input(s)") from exc

        return [
            SentimentPrediction(
                text=sample.text,
                predicted_label=bool(prob >= self.threshold),
                probability=float(prob),
                raw_score=float(score),
            )
            for sample, prob, score in zip(samples, probs, scores)
        ]


def load_predictor(path: Path) -> SentimentPredictor:
    model, metadata = load_model(path)
    return SentimentPredictor(model, metadata=metadata)
