# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from .dataset import load_dataset
from .trainer import evaluate_saved_model, run_training, split_dataset

__all__ = ["load_dataset", "split_dataset", "run_training", "evaluate_saved_model"]
