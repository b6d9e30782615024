"""Exception hierarchy for response-kit."""

from __future__ import annotations

from typing import Any


class ResponseKitError(Exception):
    """Base exception for all response-kit errors."""


class InvalidStatusCodeError(ResponseKitError, ValueError):
    """Raised when a status code falls outside ``[100, 600)``."""

    def __init__(self, status_code: Any) -> None:
        super().__init__(f"The HTTP status code is invalid: {status_code}")
        self.status_code = status_code


class ResponseAlreadySentError(ResponseKitError):
    """Raised when a builder is mutated or sent after ``send()``."""


class FormatterNotFoundError(ResponseKitError, LookupError):
    """Composite data has no formatter and the JSON fallback is disabled."""

    def __init__(self, response_format: str) -> None:
        super().__init__(f"No formatter registered for format '{response_format}'")
        self.response_format = response_format


__all__ = [
    "ResponseKitError",
    "InvalidStatusCodeError",
    "ResponseAlreadySentError",
    "FormatterNotFoundError",
]
