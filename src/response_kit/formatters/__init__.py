"""Per-format serializers for response bodies.

Usage::

    from response_kit.formatters import FormatterRegistry

    registry = FormatterRegistry.default()
    registry.register("html", str)
"""

from __future__ import annotations

from response_kit.formatters.json_formatter import json_format
from response_kit.formatters.protocols import IFormatter
from response_kit.formatters.registry import Formatter, FormatterRegistry

__all__ = [
    "IFormatter",
    "Formatter",
    "FormatterRegistry",
    "json_format",
]
