"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from response_kit.formats import DEFAULT_CONTENT_TYPES
from response_kit.formatters import FormatterRegistry

if TYPE_CHECKING:
    from response_kit.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_content_types(settings)
    _check_default_format(settings)


def _check_content_types(settings: AppSettings) -> None:
    """Reject blank MIME strings, which would emit an empty Content-Type header."""
    for response_format, mime in settings.response.content_types.items():
        if not mime.strip():
            raise ValueError(
                f"RESPONSE_KIT_RESPONSE_CONTENT_TYPES has an empty MIME type for '{response_format}'."
            )


def _check_default_format(settings: AppSettings) -> None:
    """Warn when the default format neither serializes nor sets a header."""
    response_format = settings.response.default_format
    known_types = {**DEFAULT_CONTENT_TYPES, **settings.response.content_types}
    if response_format not in FormatterRegistry.default() and response_format not in known_types:
        log.warning(
            f"RESPONSE_KIT_RESPONSE_DEFAULT_FORMAT='{response_format}' has no formatter and no content type. "
            "Data will be passed through unchanged."
        )
