# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pandas as pd
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import accuracy_score, f1_score, precision_score, recall_score, roc_auc_score
from sklearn.model_selection import train_test_split
from sklearn.pipeline import Pipeline

from ..artifacts import load_model, save_model
from ..config import TrainingConfig
from ..console import MLConsole
from ..exceptions import DatasetError, EmptyPartitionError
from ..features import LABEL_COLUMN, RAW_TEXT_COLUMN, TEXT_COLUMN, build_featurizer, enrich_dataframe
from ..inference.predictor import DEFAULT_THRESHOLD, SentimentPredictor, threshold_from
from ..schemas import EvaluationMetrics, SentimentInput, SentimentPrediction, TrainingReport
from .dataset import load_dataset

logger = logging.getLogger(__name__)

SINGLE_SAMPLE = "this was an extremely bad steak"
BATCH_SAMPLES = ("This was a horrible meal", "I love this spaghetti.")


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _safe_auc(y_true: pd.Series, y_prob: list[float]) -> float:
    if pd.Series(y_true).nunique() < 2:
        return 0.0
    value = float(roc_auc_score(y_true, y_prob))
    if value != value:  # NaN
        return 0.0
    return value


def split_dataset(df: pd.DataFrame, *, test_fraction: float = 0.2, seed: int = 42) -> tuple[pd.DataFrame, pd.DataFrame]:
    if not 0.0 < test_fraction < 1.0:
        raise ValueError(f"test_fraction must be in (0, 1), got {test_fraction}")
    if len(df) < 2:
        raise EmptyPartitionError(f"Cannot split {len(df)} record(s) into train and test partitions")

    counts = df[LABEL_COLUMN].value_counts()
    n_test = math.ceil(test_fraction * len(df))
    n_train = len(df) - n_test
    # stratified splits need every class in both partitions
    can_stratify = len(counts) >= 2 and int(counts.min()) >= 2 and min(n_test, n_train) >= len(counts)
    stratify = df[LABEL_COLUMN] if can_stratify else None
    try:
        train, test = train_test_split(df, test_size=test_fraction, random_state=seed, shuffle=True, stratify=stratify)
    except ValueError as exc:
        raise EmptyPartitionError(f"Cannot split {len(df)} record(s) with test fraction {test_fraction}: {exc}") from exc
    if train.empty or test.empty:
        raise EmptyPartitionError(f"Split produced an empty partition (train={len(train)}, test={len(test)})")
    return train, test


def build_model(*, max_iter: int = 500, c: float = 1.0, seed: int = 42) -> Pipeline:
    return Pipeline(
        steps=[
            ("preprocessor", build_featurizer()),
            ("clf", LogisticRegression(C=c, max_iter=max_iter, class_weight="balanced", solver="liblinear", random_state=seed)),
        ]
    )


def fit_model(train_df: pd.DataFrame, *, max_iter: int = 500, c: float = 1.0, seed: int = 42) -> Pipeline:
    if train_df[LABEL_COLUMN].nunique() < 2:
        raise DatasetError("Training partition holds a single class; a binary classifier needs both labels")
    enriched = enrich_dataframe(train_df)
    model = build_model(max_iter=max_iter, c=c, seed=seed)
    try:
        model.fit(enriched[[TEXT_COLUMN]], enriched[LABEL_COLUMN].astype(int))
    except ValueError as exc:
        raise DatasetError(f"Cannot fit a model on {len(train_df)} training record(s): {exc}") from exc
    return model


def evaluate_model(model: Any, test_df: pd.DataFrame, *, threshold: float = DEFAULT_THRESHOLD) -> EvaluationMetrics:
    predictor = SentimentPredictor(model, threshold=threshold)
    inputs = [SentimentInput(text=str(text)) for text in test_df[RAW_TEXT_COLUMN]]
    predictions = predictor.predict_batch(inputs)
    y_true = test_df[LABEL_COLUMN].astype(int).tolist()
    y_prob = [item.probability for item in predictions]
    y_pred = [int(item.predicted_label) for item in predictions]
    return EvaluationMetrics(
        accuracy=float(accuracy_score(y_true, y_pred)),
        auc=_safe_auc(pd.Series(y_true), y_prob),
        f1=float(f1_score(y_true, y_pred, zero_division=0)),
        precision=float(precision_score(y_true, y_pred, zero_division=0)),
        recall=float(recall_score(y_true, y_pred, zero_division=0)),
    )


def demo_predictions(predictor: SentimentPredictor, console: MLConsole) -> list[SentimentPrediction]:
    single = predictor.predict(SentimentInput(text=SINGLE_SAMPLE))
    console.predictions_table([single], title="Prediction of model with a single sample")
    batch = predictor.predict_batch([SentimentInput(text=text) for text in BATCH_SAMPLES])
    console.predictions_table(batch, title="Prediction of model with multiple samples")
    return [single, *batch]


def run_training(config: TrainingConfig, *, console: MLConsole | None = None) -> TrainingReport:
    console = console or MLConsole(enabled=False)
    df = load_dataset(config.data_path, delimiter=config.delimiter, label_first=config.label_first)
    console.info(f"Loaded {len(df)} records from {config.data_path}")

    train_df, test_df = split_dataset(df, test_fraction=config.test_fraction, seed=config.seed)
    console.info(f"Split: {len(train_df)} train / {len(test_df)} test (seed={config.seed})")

    console.info("Create and train the model")
    model = fit_model(train_df, max_iter=config.max_iter, c=config.c, seed=config.seed)
    console.success("End of training")

    metrics = evaluate_model(model, test_df)
    if test_df[LABEL_COLUMN].nunique() < 2:
        console.warn("Test partition holds a single class; AUC is reported as 0")
    console.metrics_table(metrics.as_dict(), title="Model quality metrics evaluation")
    logger.info("Evaluation metrics: %s", metrics.as_dict())

    metadata: dict[str, Any] = {
        "model_version": _timestamp_key(),
        "created_at_utc": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "rows_total": int(len(df)),
        "train_rows": int(len(train_df)),
        "test_rows": int(len(test_df)),
        "labels_positive": int(df[LABEL_COLUMN].sum()),
        "labels_negative": int((1 - df[LABEL_COLUMN]).sum()),
        "test_fraction": float(config.test_fraction),
        "seed": int(config.seed),
        "threshold": float(DEFAULT_THRESHOLD),
        "metrics": metrics.as_dict(),
    }
    predictor = SentimentPredictor(model, metadata=metadata)
    demos = demo_predictions(predictor, console)

    model_path: Path | None = None
    if config.model_path is not None:
        model_path = save_model(model, config.model_path, metadata=metadata)
        console.success(f"Model saved to {model_path}")
    else:
        console.warn("Model not saved; the server will have no artifact to load")

    return TrainingReport(
        metrics=metrics,
        train_rows=int(len(train_df)),
        test_rows=int(len(test_df)),
        model=model,
        metadata=metadata,
        demo_predictions=demos,
        model_path=model_path,
    )


def evaluate_saved_model(
    *,
    model_path: Path,
    dataset_path: Path,
    delimiter: str = "\t",
    label_first: bool = True,
) -> EvaluationMetrics:
    model, metadata = load_model(model_path)
    df = load_dataset(dataset_path, delimiter=delimiter, label_first=label_first)
    return evaluate_model(model, df, threshold=threshold_from(metadata))
