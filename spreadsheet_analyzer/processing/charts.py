"""Reshape dataset rows into grouped series for bar, line and pie charts."""

from collections.abc import Sequence
from typing import Any

from spreadsheet_analyzer.core.errors import InvalidRequestError
from spreadsheet_analyzer.core.schemas import ChartKind, ChartSeries

from .values import MISSING_LABEL, is_empty, parse_number, value_text


def _resolve_kind(kind: ChartKind | str) -> ChartKind:
    try:
        return ChartKind(kind)
    except ValueError as exc:
        raise InvalidRequestError(f"Unsupported chart kind: {kind}") from exc


def _group_key(row: dict[str, Any], x_field: str) -> str:
    value = row.get(x_field)
    # only empty cells are missing; a numeric 0 keeps its own "0" group
    if is_empty(value):
        return MISSING_LABEL
    return value_text(value)


def _summed_value(row: dict[str, Any], field: str) -> float:
    """Return the cell as a number; anything unparseable counts as zero."""
    number = parse_number(row.get(field))
    return 0.0 if number is None else number


def _group_sums(
    rows: Sequence[dict[str, Any]],
    x_field: str,
    y_fields: list[str],
) -> dict[str, dict[str, float]]:
    """Sum each y-field per distinct x-value, in first-seen order."""
    groups: dict[str, dict[str, float]] = {}
    for row in rows:
        sums = groups.setdefault(_group_key(row, x_field), dict.fromkeys(y_fields, 0.0))
        for field in y_fields:
            sums[field] += _summed_value(row, field)
    return groups


def aggregate_chart(
    rows: Sequence[dict[str, Any]],
    x_field: str | None,
    y_fields: Sequence[str],
    kind: ChartKind | str = ChartKind.bar,
) -> ChartSeries:
    """Group rows by x_field and sum every y-field per group.

    Pie charts plot only the first y-field; extra fields are dropped and a
    notice is attached to the returned series.
    """
    chart_kind = _resolve_kind(kind)
    fields = list(y_fields)

    if not rows or not x_field or not fields:
        return ChartSeries(kind=chart_kind, x_field=x_field or None, y_fields=fields)

    notices: list[str] = []
    if chart_kind is ChartKind.pie:
        if len(fields) > 1:
            notices.append(
                f"Pie charts use only the first Y-axis field '{fields[0]}'; "
                f"ignored: {', '.join(fields[1:])}."
            )
        fields = fields[:1]

    groups = _group_sums(rows, x_field, fields)

    series_rows: list[dict[str, str | float]]
    if chart_kind is ChartKind.pie:
        series_rows = [{"name": key, "value": sums[fields[0]]} for key, sums in groups.items()]
    else:
        series_rows = [{x_field: key, **sums} for key, sums in groups.items()]

    return ChartSeries(
        kind=chart_kind,
        x_field=x_field,
        y_fields=fields,
        rows=series_rows,
        notices=notices,
    )
