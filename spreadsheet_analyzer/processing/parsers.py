import csv
import io
import json
from typing import Any

from spreadsheet_analyzer.core.errors import InvalidDatasetFormatError, UnsupportedMediaTypeError
from spreadsheet_analyzer.core.schemas import Dataset

CSV_CONTENT_TYPES = ("text/csv", "application/csv")
JSON_CONTENT_TYPES = ("application/json",)


def _parse_csv_rows(text: str) -> list[dict[str, Any]]:
    reader = csv.DictReader(io.StringIO(text))
    if reader.fieldnames is None:
        raise InvalidDatasetFormatError("CSV file must include a header row.")
    rows: list[dict[str, Any]] = []
    for idx, row in enumerate(reader):
        # DictReader collects surplus cells under the None key
        if None in row:
            raise InvalidDatasetFormatError(
                f"CSV row at index {idx} has more fields than the header."
            )
        rows.append(dict(row))
    return rows


def _parse_json_rows(text: str) -> list[dict[str, Any]]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidDatasetFormatError("Invalid JSON payload.") from exc

    if not isinstance(payload, list):
        raise InvalidDatasetFormatError("JSON dataset must be a list of objects.")

    rows: list[dict[str, Any]] = []
    for idx, item in enumerate(payload):
        if not isinstance(item, dict):
            raise InvalidDatasetFormatError(f"JSON item at index {idx} is not an object.")
        rows.append(item)
    return rows


def parse_rows(content_type: str, payload: bytes) -> list[dict[str, Any]]:
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type not in CSV_CONTENT_TYPES + JSON_CONTENT_TYPES:
        raise UnsupportedMediaTypeError(f"Unsupported content type: {content_type}")

    try:
        text = payload.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise InvalidDatasetFormatError("Dataset is not valid UTF-8.") from exc

    if media_type in CSV_CONTENT_TYPES:
        return _parse_csv_rows(text)
    return _parse_json_rows(text)


def load_dataset(name: str, content_type: str, payload: bytes) -> Dataset:
    """Parse an uploaded payload into a named dataset."""
    return Dataset(name=name, rows=parse_rows(content_type, payload))
