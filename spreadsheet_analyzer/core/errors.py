"""Application-level exception hierarchy for analysis callers."""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Base class for expected errors surfaced to callers."""

    default_detail: Any = "Bad request."

    def __init__(self, detail: Any | None = None) -> None:
        """Initialize the error with custom or default detail payload."""
        self.detail = self.default_detail if detail is None else detail
        super().__init__(str(self.detail))


class InvalidRequestError(AppError):
    default_detail = "Invalid request."


class UnsupportedMediaTypeError(AppError):
    default_detail = "Unsupported content type."


class InvalidDatasetFormatError(AppError):
    default_detail = "Invalid dataset format."
