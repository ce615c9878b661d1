from typing import Any

import pytest

from spreadsheet_analyzer.core.errors import InvalidRequestError
from spreadsheet_analyzer.core.schemas import ColumnKind, ColumnProfile
from spreadsheet_analyzer.processing.classify import (
    FullScanClassifier,
    QuickClassifier,
    build_classifier,
    classify_column,
    list_columns,
    profile_columns,
)


def test_classify_column_numeric_and_categorical(sample_rows: list[dict[str, Any]]) -> None:
    assert classify_column(sample_rows, "a") is ColumnKind.numeric
    assert classify_column(sample_rows, "b") is ColumnKind.categorical


def test_single_text_sample_forces_categorical() -> None:
    rows = [{"v": 5}, {"v": "abc"}, {"v": 7}]

    assert classify_column(rows, "v") is ColumnKind.categorical


def test_empty_values_do_not_disqualify_numeric() -> None:
    rows = [{"v": None}, {"v": ""}, {"v": " 3 "}, {}]

    assert classify_column(rows, "v") is ColumnKind.numeric


def test_quick_classifier_only_samples_first_rows() -> None:
    rows: list[dict[str, Any]] = [{"v": i} for i in range(5)] + [{"v": "text"}]

    assert QuickClassifier().classify(rows, "v") is ColumnKind.numeric
    assert FullScanClassifier().classify(rows, "v") is ColumnKind.categorical
    assert QuickClassifier(sample_size=6).classify(rows, "v") is ColumnKind.categorical


def test_column_absent_from_sample_reads_numeric() -> None:
    rows: list[dict[str, Any]] = [{"a": 1}] * 5 + [{"a": 1, "sparse": "text"}]

    assert classify_column(rows, "sparse") is ColumnKind.numeric


def test_empty_dataset_is_categorical() -> None:
    assert classify_column([], "a") is ColumnKind.categorical
    assert FullScanClassifier().classify([], "a") is ColumnKind.categorical


def test_build_classifier() -> None:
    quick = build_classifier("Quick", sample_size=3)

    assert isinstance(quick, QuickClassifier)
    assert quick.sample_size == 3
    assert isinstance(build_classifier("full"), FullScanClassifier)


def test_build_classifier_unknown_raises() -> None:
    with pytest.raises(InvalidRequestError, match="Unknown classifier strategy"):
        build_classifier("random")


def test_quick_classifier_rejects_non_positive_sample() -> None:
    with pytest.raises(InvalidRequestError):
        QuickClassifier(sample_size=0)


def test_list_columns_uses_first_row() -> None:
    rows = [{"a": 1, "b": 2}, {"a": 1, "c": 3}]

    assert list_columns(rows) == ["a", "b"]
    assert list_columns([]) == []


def test_profile_columns(sample_rows: list[dict[str, Any]]) -> None:
    assert profile_columns(sample_rows) == [
        ColumnProfile(name="a", kind=ColumnKind.numeric),
        ColumnProfile(name="b", kind=ColumnKind.categorical),
    ]
