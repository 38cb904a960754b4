# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

POSITIVE = "Positive"
NEGATIVE = "Negative"


def sentiment_label(flag: bool) -> str:
    return POSITIVE if flag else NEGATIVE


@dataclass(slots=True)
class SentimentSample:
    text: str
    label: bool


@dataclass(slots=True)
class SentimentInput:
    text: str


@dataclass(slots=True)
class SentimentPrediction:
    text: str
    predicted_label: bool
    probability: float
    raw_score: float


@dataclass(slots=True)
class EvaluationMetrics:
    accuracy: float
    auc: float
    f1: float
    precision: float
    recall: float

    def as_dict(self) -> dict[str, float]:
        return {key: float(value) for key, value in asdict(self).items()}


@dataclass(slots=True)
class TrainingReport:
    metrics: EvaluationMetrics
    train_rows: int
    test_rows: int
    model: Any
    metadata: dict[str, Any] = field(default_factory=dict)
    demo_predictions: list[SentimentPrediction] = field(default_factory=list)
    model_path: Path | None = None
