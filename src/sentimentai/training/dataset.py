# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..exceptions import DatasetError
from ..features import LABEL_COLUMN, RAW_TEXT_COLUMN
from ..schemas import SentimentSample

POSITIVE_WORDS = {"1", "true", "yes", "positive", "pos"}
NEGATIVE_WORDS = {"0", "false", "no", "negative", "neg"}


def parse_label(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in POSITIVE_WORDS:
        return True
    if lowered in NEGATIVE_WORDS:
        return False
    raise ValueError(f"not a boolean-like label: {raw!r}")


def _split_line(line: str, *, delimiter: str, label_first: bool) -> tuple[str, str]:
    if label_first:
        parts = line.split(delimiter, 1)
    else:
        parts = line.rsplit(delimiter, 1)
    if len(parts) != 2:
        raise ValueError(f"missing {delimiter!r} delimiter")
    if label_first:
        return parts[0], parts[1]
    return parts[1], parts[0]


def read_samples(path: Path, *, delimiter: str = "\t", label_first: bool = True) -> list[SentimentSample]:
    path = Path(path)
    if not delimiter:
        raise DatasetError("Delimiter must not be empty")
    if not path.is_file():
        raise DatasetError(f"Dataset file not found: {path}")
    try:
        lines = path.read_text(encoding="utf-8-sig").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetError(f"Dataset file is unreadable: {path}") from exc

    rows: list[SentimentSample] = []
    for number, raw in enumerate(lines, 1):
        if not raw.strip():
            continue
        try:
            label, text = _split_line(raw, delimiter=delimiter, label_first=label_first)
            if not text.strip():
                raise ValueError("empty text")
            rows.append(SentimentSample(text=text.strip(), label=parse_label(label)))
        except ValueError as exc:
            raise DatasetError(f"{path}:{number}: malformed record ({exc})") from exc
    if not rows:
        raise DatasetError(f"Dataset file holds no records: {path}")
    return rows


def to_dataframe(rows: list[SentimentSample]) -> pd.DataFrame:
    data = [{RAW_TEXT_COLUMN: row.text, LABEL_COLUMN: int(row.label)} for row in rows]
    return pd.DataFrame(data, columns=[RAW_TEXT_COLUMN, LABEL_COLUMN])


def load_dataset(path: Path, *, delimiter: str = "\t", label_first: bool = True) -> pd.DataFrame:
    return to_dataframe(read_samples(path, delimiter=delimiter, label_first=label_first))
