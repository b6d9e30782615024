"""ResponseBuilder — sets status, picks a format, serializes data, sends.

Usage::

    from response_kit import BufferedOutputSink, ResponseBuilder, ResponseFormat

    response = ResponseBuilder(BufferedOutputSink())
    sent = (
        response.set_format(ResponseFormat.JSON)
        .set_data({"foo": "bar"})
        .set_status_code(201)
        .send()
    )
    # sent.body == '{"foo":"bar"}'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel

from response_kit.exceptions import (
    FormatterNotFoundError,
    InvalidStatusCodeError,
    ResponseAlreadySentError,
)
from response_kit.formats import DEFAULT_CONTENT_TYPES, FormatLike, ResponseFormat, format_name
from response_kit.formatters.json_formatter import json_format
from response_kit.formatters.registry import FormatterRegistry

if TYPE_CHECKING:
    from response_kit.core.config import ResponseConfig
    from response_kit.models import SentResponse
    from response_kit.sinks.protocols import IOutputSink

log = logging.getLogger(__name__)

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 600


def _is_composite(data: Any) -> bool:
    return isinstance(data, (Mapping, list, tuple, BaseModel))


def _is_invalid_code(code: int) -> bool:
    return code < MIN_STATUS_CODE or code >= MAX_STATUS_CODE


class ResponseBuilder:
    """Request-scoped response state bound to one output sink.

    The builder is mutated through fluent setters and consumed once by
    :meth:`send`, which returns a :class:`SentResponse`. After that every
    mutating call raises :class:`ResponseAlreadySentError`.
    """

    def __init__(
        self,
        sink: IOutputSink,
        *,
        registry: Optional[FormatterRegistry] = None,
        content_types: Optional[Mapping[str, str]] = None,
        default_format: FormatLike = ResponseFormat.JSON,
        json_fallback: bool = True,
    ) -> None:
        self.sink = sink
        self.formatters = registry.copy() if registry is not None else FormatterRegistry.default()
        self.content_types: dict[str, str] = dict(DEFAULT_CONTENT_TYPES)
        if content_types:
            self.content_types.update(content_types)
        self.json_fallback = json_fallback
        self._format = format_name(default_format)
        self._status_code = 200
        self._sent = False

    @classmethod
    def from_settings(
        cls,
        sink: IOutputSink,
        config: ResponseConfig,
        registry: Optional[FormatterRegistry] = None,
    ) -> ResponseBuilder:
        """Build a builder whose defaults come from ``ResponseConfig``."""
        return cls(
            sink,
            registry=registry,
            content_types=config.content_types,
            default_format=config.default_format,
            json_fallback=config.json_fallback,
        )

    # ── Format / data ─────────────────────────────────────────────────

    @property
    def format(self) -> str:
        return self._format

    def set_format(self, response_format: FormatLike) -> ResponseBuilder:
        """Store the format and emit its content type when one is mapped.

        Unknown formats are accepted; they simply have no formatter.
        """
        self._ensure_not_sent()
        self._format = format_name(response_format)
        mime = self.content_types.get(self._format)
        if mime is not None:
            self.sink.set_content_type(mime)
        return self

    def set_data(self, data: Any) -> ResponseBuilder:
        """Serialize *data* for the current format and buffer it in the sink."""
        self._ensure_not_sent()
        formatter = self.formatters.get(self._format)
        if formatter is not None:
            body = formatter(data)
        elif _is_composite(data):
            if not self.json_fallback:
                raise FormatterNotFoundError(self._format)
            # Composite data without a formatter is always JSON, whatever the format.
            log.debug(f"No formatter for '{self._format}', serializing composite data as JSON")
            body = json_format(data)
        else:
            body = data
        self.sink.set_output_body(body)
        return self

    def get_output(self) -> Any:
        return self.sink.get_output_body()

    # ── Status ────────────────────────────────────────────────────────

    @property
    def status_code(self) -> int:
        return self._status_code

    def get_status_code(self) -> int:
        return self._status_code

    def set_status_code(self, code: Any = None, text: Optional[str] = None) -> ResponseBuilder:
        """Set the response status code.

        ``None`` means 200. The sink supplies the standard reason phrase
        when *text* is omitted.

        Raises:
            InvalidStatusCodeError: if *code* is not an integer in
                ``[100, 600)``. The stored code and the sink are untouched.
        """
        self._ensure_not_sent()
        if code is None:
            code = 200
        try:
            status_code = int(code)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidStatusCodeError(code) from exc
        if _is_invalid_code(status_code):
            raise InvalidStatusCodeError(code)
        self._status_code = status_code
        self.sink.set_status_header(status_code, text)
        return self

    @property
    def is_invalid(self) -> bool:
        """Whether the stored status code is outside ``[100, 600)``."""
        return _is_invalid_code(self._status_code)

    def get_is_invalid(self) -> bool:
        return self.is_invalid

    # ── Sending ───────────────────────────────────────────────────────

    @property
    def sent(self) -> bool:
        return self._sent

    def send(self) -> SentResponse:
        """Flush the sink and return the terminal :class:`SentResponse`.

        The caller is expected to return the result straight up its call
        stack; nothing else should happen for this request afterwards.
        """
        self._ensure_not_sent()
        sent = self.sink.flush()
        self._sent = True
        log.info(
            "Response sent",
            extra={"status_code": sent.status_code, "response_format": self._format},
        )
        return sent

    @staticmethod
    def json_format(data: Any) -> str:
        return json_format(data)

    def json(
        self,
        data: Any,
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
    ) -> SentResponse:
        """Send *data* as JSON, optionally with a status code and reason."""
        if status_code:
            self.set_status_code(status_code, status_text)
        return self.set_format(ResponseFormat.JSON).set_data(data).send()

    def _ensure_not_sent(self) -> None:
        if self._sent:
            raise ResponseAlreadySentError("Response has already been sent")
