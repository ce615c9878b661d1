"""Statistics computation utilities for a single dataset column."""

import math
import statistics
from collections import Counter
from collections.abc import Sequence
from typing import Any

from spreadsheet_analyzer.core.schemas import (
    CategoricalStatistics,
    ColumnKind,
    FrequencyEntry,
    NumericStatistics,
)

from .classify import ColumnClassifier, classify_column
from .values import is_empty, parse_number, value_text

DEFAULT_TOP_K = 10


def _median(sorted_values: list[float]) -> float:
    """Return the middle element, or the mean of the two middle elements."""
    middle = len(sorted_values) // 2
    if len(sorted_values) % 2 == 0:
        return (sorted_values[middle - 1] + sorted_values[middle]) / 2
    return sorted_values[middle]


def _positional_quantile(sorted_values: list[float], q: float) -> float:
    """Return the element at floor(n * q); no interpolation."""
    return sorted_values[math.floor(len(sorted_values) * q)]


def compute_numeric_stats(
    rows: Sequence[dict[str, Any]],
    column: str,
) -> NumericStatistics | None:
    """Compute descriptive statistics over the parseable values of a column.

    Empty and non-numeric cells are excluded and reported as ``empty_count``.
    Returns None when no value parses.
    """
    values: list[float] = []
    for row in rows:
        number = parse_number(row.get(column))
        if number is not None:
            values.append(number)

    if not values:
        return None

    count = len(values)
    total = sum(values)
    # exact rational mean keeps min <= mean <= max for float input
    mean = statistics.mean(values)
    sorted_values = sorted(values)
    minimum = sorted_values[0]
    maximum = sorted_values[-1]

    return NumericStatistics(
        column=column,
        count=count,
        empty_count=len(rows) - count,
        min=minimum,
        max=maximum,
        range=maximum - minimum,
        sum=total,
        mean=mean,
        median=_median(sorted_values),
        std_dev=statistics.pstdev(values, mean),
        q1=_positional_quantile(sorted_values, 0.25),
        q3=_positional_quantile(sorted_values, 0.75),
    )


def compute_categorical_stats(
    rows: Sequence[dict[str, Any]],
    column: str,
    top_k: int = DEFAULT_TOP_K,
) -> CategoricalStatistics:
    """Compute frequency statistics keyed by each value's string form."""
    counter: Counter[str] = Counter()
    empty_count = 0
    for row in rows:
        value = row.get(column)
        if is_empty(value):
            empty_count += 1
            continue
        counter[value_text(value)] += 1

    # most_common is a stable sort, so ties keep first-seen order
    ranked = counter.most_common()
    mode, mode_frequency = ranked[0] if ranked else (None, 0)

    return CategoricalStatistics(
        column=column,
        count=len(rows) - empty_count,
        empty_count=empty_count,
        unique_count=len(counter),
        mode=mode,
        mode_frequency=mode_frequency,
        frequencies=[FrequencyEntry(value=value, count=count) for value, count in ranked[:top_k]],
    )


def compute_column_stats(
    rows: Sequence[dict[str, Any]],
    column: str | None,
    kind: ColumnKind | None = None,
    *,
    classifier: ColumnClassifier | None = None,
    top_k: int = DEFAULT_TOP_K,
) -> NumericStatistics | CategoricalStatistics | None:
    """Compute statistics for one column, or None when unavailable."""
    if not rows or not column:
        return None

    if kind is None:
        kind = classify_column(rows, column, classifier)

    if ColumnKind(kind) is ColumnKind.numeric:
        return compute_numeric_stats(rows, column)
    return compute_categorical_stats(rows, column, top_k=top_k)
