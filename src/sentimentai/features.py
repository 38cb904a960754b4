# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
import unicodedata

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.feature_extraction.text import TfidfVectorizer

RAW_TEXT_COLUMN = "sentiment_text"
TEXT_COLUMN = "text"
LABEL_COLUMN = "label"

URL_RE = re.compile(r"https?://[^\s<>\"']+|www\.[^\s<>\"']+", flags=re.IGNORECASE)
REPEATED_CHAR_RE = re.compile(r"(.)\1{3,}")
WHITESPACE_RE = re.compile(r"\s+")


def _safe_text(value: object) -> str:
    if value is None or (isinstance(value, float) and value != value):
        return ""
    return str(value)


def normalize_text(value: object) -> str:
    text = unicodedata.normalize("NFKC", _safe_text(value)).lower()
    text = URL_RE.sub(" url ", text)
    # "soooooo good" and "sooo good" share n-grams
    text = REPEATED_CHAR_RE.sub(r"\1\1\1", text)
    return WHITESPACE_RE.sub(" ", text).strip()


def enrich_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    if RAW_TEXT_COLUMN not in out.columns:
        out[RAW_TEXT_COLUMN] = ""
    out[RAW_TEXT_COLUMN] = out[RAW_TEXT_COLUMN].map(_safe_text)
    out[TEXT_COLUMN] = out[RAW_TEXT_COLUMN].map(normalize_text)
    return out


def build_featurizer(*, word_features: int = 60000, char_features: int = 40000, min_df: int = 1) -> ColumnTransformer:
    return ColumnTransformer(
        transformers=[
            (
                "word_tfidf",
                TfidfVectorizer(analyzer="word", ngram_range=(1, 2), max_features=word_features, min_df=min_df, sublinear_tf=True),
                TEXT_COLUMN,
            ),
            (
                "char_tfidf",
                TfidfVectorizer(analyzer="char_wb", ngram_range=(3, 5), max_features=char_features, min_df=min_df, sublinear_tf=True),
                TEXT_COLUMN,
            ),
        ],
        sparse_threshold=0.3,
    )
