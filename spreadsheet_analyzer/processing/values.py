"""Cell value normalization shared by classification, statistics and charts."""

import math
from dataclasses import dataclass
from typing import Any

MISSING_LABEL = "undefined"


@dataclass(frozen=True, slots=True)
class Number:
    value: float


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class Empty:
    pass


Value = Number | Text | Empty

EMPTY = Empty()


def _to_float(value: Any) -> float:
    """Convert numeric-like values to float and reject non-numeric values."""
    if isinstance(value, bool):
        raise ValueError("bool is not numeric")
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        # float() accepts digit separators, plain number parsing does not
        if "_" in value:
            raise ValueError("digit separators are not numeric")
        number = float(value)
    else:
        raise ValueError("value is not numeric")
    if not math.isfinite(number):
        raise ValueError("value is not finite")
    return number


def is_empty(value: Any) -> bool:
    """Return whether a raw cell value should be treated as empty."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, float):
        return math.isnan(value)
    return False


def to_value(raw: Any) -> Value:
    """Classify a raw cell into the closed Number/Text/Empty variant."""
    if is_empty(raw):
        return EMPTY
    try:
        return Number(_to_float(raw))
    except (ValueError, OverflowError):
        return Text(value_text(raw))


def read_value(row: dict[str, Any], column: str) -> Value:
    """Read a column from a row; a missing key reads as empty."""
    return to_value(row.get(column))


def parse_number(raw: Any) -> float | None:
    """Return the numeric value of a cell, or None for empty and text cells."""
    value = to_value(raw)
    if isinstance(value, Number):
        return value.value
    return None


def value_text(raw: Any) -> str:
    """Return the string form used as grouping and frequency key."""
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    return str(raw)
