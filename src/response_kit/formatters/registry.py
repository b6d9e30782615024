"""Formatter registry mapping a format tag to its serializer."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from response_kit.formats import FormatLike, ResponseFormat, format_name
from response_kit.formatters.json_formatter import json_format
from response_kit.formatters.protocols import IFormatter

log = logging.getLogger(__name__)

Formatter = IFormatter


class FormatterRegistry:
    """Per-format formatter lookup, seeded with ``json`` by :meth:`default`.

    Builders hold their own copy, so registrations made while handling one
    request never leak into another.
    """

    def __init__(self, formatters: Optional[dict[str, Formatter]] = None) -> None:
        self._formatters: dict[str, Formatter] = dict(formatters or {})

    @classmethod
    def default(cls) -> FormatterRegistry:
        return cls({ResponseFormat.JSON.value: json_format})

    def register(self, response_format: FormatLike, formatter: Formatter) -> None:
        name = format_name(response_format)
        if not callable(formatter):
            raise TypeError(f"Formatter for '{name}' must be callable")
        self._formatters[name] = formatter
        log.debug(f"Registered formatter for '{name}'")

    def unregister(self, response_format: FormatLike) -> None:
        """Remove the formatter for *response_format* (no-op if absent)."""
        self._formatters.pop(format_name(response_format), None)

    def get(self, response_format: FormatLike) -> Optional[Formatter]:
        return self._formatters.get(format_name(response_format))

    def formats(self) -> list[str]:
        return sorted(self._formatters)

    def copy(self) -> FormatterRegistry:
        return FormatterRegistry(self._formatters)

    def __contains__(self, response_format: object) -> bool:
        if not isinstance(response_format, (str, ResponseFormat)):
            return False
        return format_name(response_format) in self._formatters

    def __iter__(self) -> Iterator[str]:
        return iter(self.formats())

    def __len__(self) -> int:
        return len(self._formatters)
