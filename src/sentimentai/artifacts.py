# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import logging
import pickle
from pathlib import Path
from typing import Any

import joblib

from .exceptions import ModelLoadError

logger = logging.getLogger(__name__)


def metadata_path_for(model_path: Path) -> Path:
    return model_path.with_suffix(".json")


def save_model(model: Any, path: Path, *, metadata: dict[str, Any]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump(model, path)
    metadata_path_for(path).write_text(json.dumps(metadata, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    logger.info("Saved model artifact to %s", path)
    return path


def read_metadata(model_path: Path) -> dict[str, Any]:
    path = metadata_path_for(Path(model_path))
    if not path.exists():
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable model metadata at %s", path)
        return {}
    return payload if isinstance(payload, dict) else {}


def load_model(path: Path) -> tuple[Any, dict[str, Any]]:
    path = Path(path)
    if not path.is_file():
        raise ModelLoadError(f"Model artifact not found: {path}")
    try:
        model = joblib.load(path)
    except (OSError, EOFError, ValueError, KeyError, IndexError, TypeError, pickle.UnpicklingError, AttributeError, ImportError) as exc:
        raise ModelLoadError(f"Model artifact is unreadable: {path}") from exc
    if not hasattr(model, "predict_proba"):
        raise ModelLoadError(f"Model artifact does not hold a probabilistic classifier: {path}")
    logger.info("Loaded model artifact from %s", path)
    return model, read_metadata(path)
