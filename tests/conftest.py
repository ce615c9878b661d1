from collections.abc import Generator
from typing import Any

import pytest

from spreadsheet_analyzer.core.logging import clear_context, configure_logging
from spreadsheet_analyzer.core.schemas import Dataset


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    configure_logging(
        log_level="INFO",
        log_format="console",
        service_name="spreadsheet-analyzer-tests",
        environment="test",
    )


@pytest.fixture(autouse=True)
def _clear_log_context() -> Generator[None, None, None]:
    yield
    clear_context()


@pytest.fixture()
def sample_rows() -> list[dict[str, Any]]:
    return [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}, {"a": 3, "b": "x"}]


@pytest.fixture()
def sales_rows() -> list[dict[str, Any]]:
    return [
        {"region": "north", "units": "10", "revenue": 100.5, "note": ""},
        {"region": "south", "units": "4", "revenue": "40", "note": "late"},
        {"region": "north", "units": "n/a", "revenue": 20, "note": None},
        {"region": "", "units": 6, "revenue": "oops", "note": "late"},
        {"region": "east", "units": 2, "revenue": 12, "note": "ok"},
    ]


@pytest.fixture()
def dataset(sample_rows: list[dict[str, Any]]) -> Dataset:
    return Dataset(name="sample.csv", rows=sample_rows)
