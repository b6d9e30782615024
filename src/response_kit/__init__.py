"""response-kit: format-aware HTTP response building.

Usage::

    from response_kit import BufferedOutputSink, ResponseBuilder

    sent = ResponseBuilder(BufferedOutputSink()).json({"x": 1}, 404, "Not Found")
"""

from __future__ import annotations

from response_kit.core.config import AppSettings, ResponseConfig
from response_kit.exceptions import (
    FormatterNotFoundError,
    InvalidStatusCodeError,
    ResponseAlreadySentError,
    ResponseKitError,
)
from response_kit.formats import DEFAULT_CONTENT_TYPES, ResponseFormat
from response_kit.formatters import FormatterRegistry, IFormatter, json_format
from response_kit.models import SentResponse
from response_kit.response import ResponseBuilder
from response_kit.sinks import BufferedOutputSink, IOutputSink

__all__ = [
    "AppSettings",
    "ResponseConfig",
    "ResponseKitError",
    "InvalidStatusCodeError",
    "ResponseAlreadySentError",
    "FormatterNotFoundError",
    "ResponseFormat",
    "DEFAULT_CONTENT_TYPES",
    "FormatterRegistry",
    "IFormatter",
    "json_format",
    "SentResponse",
    "ResponseBuilder",
    "BufferedOutputSink",
    "IOutputSink",
]
