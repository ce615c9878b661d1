"""Column type inference strategies."""

from collections.abc import Sequence
from typing import Any, Protocol

from spreadsheet_analyzer.core.errors import InvalidRequestError
from spreadsheet_analyzer.core.schemas import ColumnKind, ColumnProfile

from .values import Text, read_value

DEFAULT_SAMPLE_SIZE = 5


class ColumnClassifier(Protocol):
    def classify(self, rows: Sequence[dict[str, Any]], column: str) -> ColumnKind: ...


def _classify_rows(rows: Sequence[dict[str, Any]], column: str) -> ColumnKind:
    """Return numeric unless some value in rows is non-empty text."""
    for row in rows:
        if isinstance(read_value(row, column), Text):
            return ColumnKind.categorical
    return ColumnKind.numeric


class QuickClassifier:
    """Classify a column from the first few rows only.

    A column that is absent or empty in every sampled row reads as numeric,
    even when later rows hold text.
    """

    def __init__(self, sample_size: int = DEFAULT_SAMPLE_SIZE) -> None:
        if sample_size < 1:
            raise InvalidRequestError("sample_size must be at least 1.")
        self.sample_size = sample_size

    def classify(self, rows: Sequence[dict[str, Any]], column: str) -> ColumnKind:
        if not rows:
            return ColumnKind.categorical
        return _classify_rows(rows[: self.sample_size], column)


class FullScanClassifier:
    """Classify a column by inspecting every row."""

    def classify(self, rows: Sequence[dict[str, Any]], column: str) -> ColumnKind:
        if not rows:
            return ColumnKind.categorical
        return _classify_rows(rows, column)


def build_classifier(name: str, sample_size: int = DEFAULT_SAMPLE_SIZE) -> ColumnClassifier:
    """Return the classifier strategy registered under name."""
    normalized = name.strip().lower()
    if normalized == "quick":
        return QuickClassifier(sample_size)
    if normalized == "full":
        return FullScanClassifier()
    raise InvalidRequestError(f"Unknown classifier strategy: {name}")


def classify_column(
    rows: Sequence[dict[str, Any]],
    column: str,
    classifier: ColumnClassifier | None = None,
) -> ColumnKind:
    return (classifier or QuickClassifier()).classify(rows, column)


def list_columns(rows: Sequence[dict[str, Any]]) -> list[str]:
    """Return column names, taken from the first row."""
    if not rows:
        return []
    return list(rows[0].keys())


def profile_columns(
    rows: Sequence[dict[str, Any]],
    classifier: ColumnClassifier | None = None,
) -> list[ColumnProfile]:
    classifier = classifier or QuickClassifier()
    return [
        ColumnProfile(name=column, kind=classifier.classify(rows, column))
        for column in list_columns(rows)
    ]
