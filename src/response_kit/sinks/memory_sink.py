"""In-memory output sink that buffers headers and body until flushed."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Callable, Optional

from response_kit.models import SentResponse

log = logging.getLogger(__name__)

Transport = Callable[[SentResponse], None]


def standard_reason(code: int) -> str:
    """Standard reason phrase for *code*, or ``""`` for unassigned codes."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


class BufferedOutputSink:
    """Holds one response in memory.

    ``flush()`` snapshots the buffer into a :class:`SentResponse`, passes it
    to the optional *transport* and keeps it in :attr:`flushed`.
    """

    def __init__(self, transport: Optional[Transport] = None, charset: Optional[str] = None) -> None:
        self._transport = transport
        self._charset = charset
        self.headers: dict[str, str] = {}
        self.status_code = 200
        self.reason = standard_reason(200)
        self.body: Any = ""
        self.flushed: Optional[SentResponse] = None

    def set_content_type(self, mime: str) -> None:
        if self._charset and "charset=" not in mime.lower():
            mime = f"{mime.rstrip('; ')}; charset={self._charset}"
        self.headers["Content-Type"] = mime

    def set_status_header(self, code: int, text: Optional[str] = None) -> None:
        self.status_code = int(code)
        self.reason = text if text else standard_reason(self.status_code)

    def set_output_body(self, body: Any) -> None:
        self.body = body

    def get_output_body(self) -> Any:
        return self.body

    def flush(self) -> SentResponse:
        sent = SentResponse(
            status_code=self.status_code,
            reason=self.reason,
            headers=dict(self.headers),
            body="" if self.body is None else str(self.body),
        )
        if self._transport is not None:
            self._transport(sent)
        self.flushed = sent
        log.debug(f"Flushed {sent.status_code} response ({len(sent.body)} chars)")
        return sent
