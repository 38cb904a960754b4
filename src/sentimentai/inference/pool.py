# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Pool of prediction engines shared across request threads.

Each registered model is loaded from its artifact once. The pool then keeps
``size`` independent :class:`SentimentPredictor` instances (deep copies of the
fitted pipeline) in a :class:`queue.Queue`; a caller checks one out, uses it
exclusively and hands it back. ``reload`` swaps in a new generation of
engines without blocking callers that already hold one.
"""
from __future__ import annotations

import copy
import logging
import queue
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from ..artifacts import load_model
from ..exceptions import PoolExhaustedError, UnknownModelError
from ..schemas import SentimentInput, SentimentPrediction
from .predictor import SentimentPredictor

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _ModelSlot:
    name: str
    path: Path
    generation: int
    metadata: dict[str, Any]
    engines: queue.Queue[SentimentPredictor]


class PredictionEnginePool:
    def __init__(self, *, size: int = 4, acquire_timeout: float | None = 30.0) -> None:
        if size < 1:
            raise ValueError(f"pool size must be >= 1, got {size}")
        self.size = size
        self.acquire_timeout = acquire_timeout
        self._slots: dict[str, _ModelSlot] = {}
        self._lock = threading.Lock()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._slots

    @property
    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._slots)

    def _build_slot(self, name: str, path: Path, generation: int) -> _ModelSlot:
        model, metadata = load_model(path)
        engines: queue.Queue[SentimentPredictor] = queue.Queue(maxsize=self.size)
        for _ in range(self.size):
            engines.put_nowait(SentimentPredictor(copy.deepcopy(model), metadata=metadata))
        return _ModelSlot(name=name, path=Path(path), generation=generation, metadata=metadata, engines=engines)

    def _slot(self, name: str) -> _ModelSlot:
        with self._lock:
            slot = self._slots.get(name)
        if slot is None:
            raise UnknownModelError(f"No model registered under {name!r}")
        return slot

    def add_model(self, name: str, path: Path) -> None:
        slot = self._build_slot(name, Path(path), generation=1)
        with self._lock:
            if name in self._slots:
                raise ValueError(f"model {name!r} is already registered")
            self._slots[name] = slot
        logger.info("Registered model %r from %s (%d engines)", name, path, self.size)

    def reload(self, name: str) -> dict[str, Any]:
        current = self._slot(name)
        fresh = self._build_slot(name, current.path, generation=current.generation + 1)
        with self._lock:
            self._slots[name] = fresh
        logger.info("Reloaded model %r from %s (generation %d)", name, fresh.path, fresh.generation)
        return dict(fresh.metadata)

    def metadata(self, name: str) -> dict[str, Any]:
        return dict(self._slot(name).metadata)

    @contextmanager
    def engine(self, name: str) -> Iterator[SentimentPredictor]:
        slot = self._slot(name)
        try:
            predictor = slot.engines.get(timeout=self.acquire_timeout)
        except queue.Empty as exc:
            raise PoolExhaustedError(
                f"No free engine for {name!r} after {self.acquire_timeout}s ({self.size} in use)"
            ) from exc
        try:
            yield predictor
        finally:
            # engines of a replaced generation go back to the orphaned queue
            slot.engines.put_nowait(predictor)

    def predict(self, name: str, sample: SentimentInput) -> SentimentPrediction:
        with self.engine(name) as predictor:
            return predictor.predict(sample)
