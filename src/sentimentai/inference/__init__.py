# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from .pool import PredictionEnginePool
from .predictor import SentimentPredictor, load_predictor

__all__ = ["PredictionEnginePool", "SentimentPredictor", "load_predictor"]
