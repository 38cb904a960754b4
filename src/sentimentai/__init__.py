# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Sentiment AI package."""

from .inference.pool import PredictionEnginePool
from .inference.predictor import SentimentPredictor, load_predictor
from .schemas import SentimentInput, SentimentPrediction, SentimentSample, sentiment_label

__all__ = [
    "SentimentSample",
    "SentimentInput",
    "SentimentPrediction",
    "SentimentPredictor",
    "PredictionEnginePool",
    "load_predictor",
    "sentiment_label",
]
