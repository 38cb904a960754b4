# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations


class SentimentAIError(RuntimeError):
    pass


class DatasetError(SentimentAIError):
    pass


class EmptyPartitionError(DatasetError):
    pass


class ModelLoadError(SentimentAIError):
    pass


class InferenceError(SentimentAIError):
    pass


class UnknownModelError(SentimentAIError):
    pass


class PoolExhaustedError(SentimentAIError):
    pass
