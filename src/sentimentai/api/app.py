# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status

from ..config import ServingConfig
from ..exceptions import InferenceError, ModelLoadError, PoolExhaustedError
from ..inference.pool import PredictionEnginePool
from ..schemas import SentimentInput, sentiment_label
from .schemas import HealthResponse, ReloadResponse, SentimentRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def get_pool(request: Request) -> PredictionEnginePool:
    return request.app.state.pool


def get_model_name(request: Request) -> str:
    return request.app.state.model_name


@router.get("/health", response_model=HealthResponse)
def health(pool: PredictionEnginePool = Depends(get_pool)) -> HealthResponse:
    return HealthResponse(ok=True, models=pool.names)


@router.post("/api/predict", response_model=str)
def predict(
    body: SentimentRequest,
    pool: PredictionEnginePool = Depends(get_pool),
    model_name: str = Depends(get_model_name),
) -> str:
    try:
        prediction = pool.predict(model_name, SentimentInput(text=body.sentiment_text))
    except PoolExhaustedError as exc:
        logger.warning("%s", exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Prediction engines are busy") from exc
    except InferenceError as exc:
        logger.exception("Prediction failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return sentiment_label(prediction.predicted_label)


@router.post("/api/reload", response_model=ReloadResponse)
def reload_model(
    pool: PredictionEnginePool = Depends(get_pool),
    model_name: str = Depends(get_model_name),
) -> ReloadResponse:
    try:
        metadata = pool.reload(model_name)
    except ModelLoadError as exc:
        logger.error("Reload of %r failed, keeping the current model: %s", model_name, exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return ReloadResponse(model=model_name, model_version=str(metadata.get("model_version") or "unknown"))


def create_app(config: ServingConfig | None = None, *, pool: PredictionEnginePool | None = None) -> FastAPI:
    config = config or ServingConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine_pool = pool or PredictionEnginePool(size=config.pool_size, acquire_timeout=config.acquire_timeout)
        if config.model_name not in engine_pool:
            # ModelLoadError propagates and aborts startup
            engine_pool.add_model(config.model_name, config.model_path)
        app.state.pool = engine_pool
        app.state.model_name = config.model_name
        logger.info("Serving %r with %d engines", config.model_name, engine_pool.size)
        yield

    app = FastAPI(title="Sentiment AI", lifespan=lifespan)
    app.include_router(router)
    return app
