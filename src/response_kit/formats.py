"""Response formats and their default content types."""

from __future__ import annotations

from enum import Enum
from typing import Union


class ResponseFormat(str, Enum):
    """Output formats understood by :class:`~response_kit.response.ResponseBuilder`.

    - ``RAW``: data is used as the body without conversion, no header added.
    - ``HTML``: data is used as the body without conversion.
    - ``JSON``: data is serialized to JSON text.
    - ``JSONP``: data is a mapping with ``data`` and ``callback`` keys.
    - ``XML``: data is rendered as an XML document.

    Only ``JSON`` ships with a formatter. The others rely on formatters
    registered by the caller.
    """

    RAW = "raw"
    HTML = "html"
    JSON = "json"
    JSONP = "jsonp"
    XML = "xml"


FormatLike = Union[ResponseFormat, str]

DEFAULT_CONTENT_TYPES: dict[str, str] = {
    ResponseFormat.JSON.value: "application/json;",
}


def format_name(response_format: FormatLike) -> str:
    """Return the plain string tag for an enum member or a caller string."""
    if isinstance(response_format, ResponseFormat):
        return response_format.value
    return str(response_format)


__all__ = ["ResponseFormat", "FormatLike", "DEFAULT_CONTENT_TYPES", "format_name"]
