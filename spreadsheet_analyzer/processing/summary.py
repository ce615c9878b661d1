"""Dataset overview and default column selections."""

from collections.abc import Sequence
from typing import Any

from spreadsheet_analyzer.core.schemas import ColumnKind, ColumnProfile, DatasetSummary

from .classify import ColumnClassifier, profile_columns


def summarize_dataset(
    rows: Sequence[dict[str, Any]],
    classifier: ColumnClassifier | None = None,
) -> DatasetSummary | None:
    """Return row/column counts split by column kind, or None for no rows."""
    if not rows:
        return None

    profiles = profile_columns(rows, classifier)
    numeric_count = sum(1 for profile in profiles if profile.kind is ColumnKind.numeric)
    return DatasetSummary(
        row_count=len(rows),
        column_count=len(profiles),
        numeric_column_count=numeric_count,
        categorical_column_count=len(profiles) - numeric_count,
        columns=profiles,
    )


def _first_of_kind(profiles: Sequence[ColumnProfile], kind: ColumnKind) -> str | None:
    return next((profile.name for profile in profiles if profile.kind is kind), None)


def default_analysis_column(profiles: Sequence[ColumnProfile]) -> str | None:
    """Pick the first numeric column as the initial statistics target."""
    return _first_of_kind(profiles, ColumnKind.numeric)


def default_chart_fields(
    profiles: Sequence[ColumnProfile],
) -> tuple[str, list[str]] | None:
    """Pick the first categorical column as x-axis and first numeric as y-axis.

    Returns None unless the dataset has at least one column of each kind.
    """
    x_field = _first_of_kind(profiles, ColumnKind.categorical)
    y_field = _first_of_kind(profiles, ColumnKind.numeric)
    if x_field is None or y_field is None:
        return None
    return x_field, [y_field]


def toggle_y_field(y_fields: Sequence[str], field: str) -> list[str]:
    """Add or remove field from the y-axis selection.

    The last remaining field is never removed.
    """
    if field not in y_fields:
        return [*y_fields, field]
    if len(y_fields) > 1:
        return [existing for existing in y_fields if existing != field]
    return list(y_fields)
