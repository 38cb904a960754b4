# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SentimentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sentiment_text: str = Field(..., alias="sentimentText", min_length=1)

    @field_validator("sentiment_text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("sentimentText must not be blank")
        return value


class HealthResponse(BaseModel):
    ok: bool
    models: list[str]


class ReloadResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model: str
    model_version: str
