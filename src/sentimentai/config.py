# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Runtime settings for the training and serving processes.

Both dataclasses read ``SENTIMENT_*`` environment variables through
:meth:`from_env`; command line flags are applied on top with
:func:`dataclasses.replace`.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import get_bool_env, get_env, get_float_env, get_int_env

DEFAULT_DATA_PATH = Path("data") / "yelp_labelled.txt"
DEFAULT_MODEL_PATH = Path("model") / "sentiment_model.joblib"
DEFAULT_MODEL_NAME = "SentimentAnalysisModel"

DELIMITER_ALIASES = {"\\t": "\t", "tab": "\t", "comma": ",", "pipe": "|", "semicolon": ";", "space": " "}


def parse_delimiter(raw: str | None, default: str = "\t") -> str:
    if raw is None or raw == "":
        return default
    return DELIMITER_ALIASES.get(raw.lower(), raw)


@dataclass(frozen=True, slots=True)
class TrainingConfig:
    data_path: Path = DEFAULT_DATA_PATH
    model_path: Path | None = DEFAULT_MODEL_PATH
    delimiter: str = "\t"
    label_first: bool = True
    test_fraction: float = 0.2
    seed: int = 42
    max_iter: int = 500
    c: float = 1.0

    @classmethod
    def from_env(cls) -> "TrainingConfig":
        return cls(
            data_path=Path(get_env("SENTIMENT_DATA_PATH", str(DEFAULT_DATA_PATH)) or DEFAULT_DATA_PATH),
            model_path=Path(get_env("SENTIMENT_MODEL_PATH", str(DEFAULT_MODEL_PATH)) or DEFAULT_MODEL_PATH),
            delimiter=parse_delimiter(get_env("SENTIMENT_DELIMITER")),
            label_first=get_bool_env("SENTIMENT_LABEL_FIRST", True),
            test_fraction=get_float_env("SENTIMENT_TEST_FRACTION", 0.2),
            seed=get_int_env("SENTIMENT_SEED", 42),
            max_iter=max(get_int_env("SENTIMENT_MAX_ITER", 500), 1),
            c=get_float_env("SENTIMENT_C", 1.0),
        )


@dataclass(frozen=True, slots=True)
class ServingConfig:
    model_path: Path = DEFAULT_MODEL_PATH
    model_name: str = DEFAULT_MODEL_NAME
    pool_size: int = 4
    acquire_timeout: float = 30.0
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "ServingConfig":
        return cls(
            model_path=Path(get_env("SENTIMENT_MODEL_PATH", str(DEFAULT_MODEL_PATH)) or DEFAULT_MODEL_PATH),
            model_name=get_env("SENTIMENT_MODEL_NAME", DEFAULT_MODEL_NAME) or DEFAULT_MODEL_NAME,
            pool_size=max(get_int_env("SENTIMENT_POOL_SIZE", 4), 1),
            acquire_timeout=max(get_float_env("SENTIMENT_ACQUIRE_TIMEOUT", 30.0), 0.0),
            host=get_env("SENTIMENT_HOST", "127.0.0.1") or "127.0.0.1",
            port=get_int_env("SENTIMENT_PORT", 8000),
        )
