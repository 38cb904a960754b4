# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path

import pytest

from sentimentai.exceptions import DatasetError
from sentimentai.training.dataset import load_dataset, parse_label, read_samples

from .conftest import review_corpus, write_corpus


def test_load_dataset_label_first(corpus_path: Path) -> None:
    df = load_dataset(corpus_path)
    assert list(df.columns) == ["sentiment_text", "label"]
    assert len(df) == len(review_corpus())
    assert set(df["label"].unique()) == {0, 1}
    assert df.iloc[0]["sentiment_text"] == "I love this spaghetti."
    assert df.iloc[0]["label"] == 1


def test_load_dataset_text_first(tmp_path: Path) -> None:
    path = write_corpus(tmp_path / "yelp.txt", label_first=False)
    df = load_dataset(path, label_first=False)
    assert len(df) == len(review_corpus())
    assert df.iloc[0]["sentiment_text"] == "I love this spaghetti."


def test_text_may_contain_delimiter(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    path.write_text("1,Great food, great service\n", encoding="utf-8")
    assert read_samples(path, delimiter=",")[0].text == "Great food, great service"
    path.write_text("Good, but slow,0\n", encoding="utf-8")
    sample = read_samples(path, delimiter=",", label_first=False)[0]
    assert sample.text == "Good, but slow"
    assert sample.label is False


def test_blank_lines_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("\n1\tnice\n\n   \n0\tmeh\n", encoding="utf-8")
    assert [row.label for row in read_samples(path)] == [True, False]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("0", False), ("True", True), ("false", False), (" yes ", True), ("NEGATIVE", False)],
)
def test_parse_label(raw: str, expected: bool) -> None:
    assert parse_label(raw) is expected


def test_missing_file_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(DatasetError, match="not found"):
        load_dataset(tmp_path / "absent.txt")


def test_malformed_line_names_line_number(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("1\tgood\nno delimiter here\n", encoding="utf-8")
    with pytest.raises(DatasetError, match=":2:"):
        load_dataset(path)


def test_unknown_label_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("maybe\tgood food\n", encoding="utf-8")
    with pytest.raises(DatasetError, match="malformed"):
        load_dataset(path)


def test_empty_file_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("\n\n", encoding="utf-8")
    with pytest.raises(DatasetError, match="no records"):
        load_dataset(path)


def test_blank_text_is_malformed(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("1\tgood\n0\t \n", encoding="utf-8")
    with pytest.raises(DatasetError, match=r":2: malformed record \(empty text\)"):
        load_dataset(path)
