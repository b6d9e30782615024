"""Output sink protocol: the boundary between a builder and the transport."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from response_kit.models import SentResponse


@runtime_checkable
class IOutputSink(Protocol):
    """Protocol for output sinks (in-memory buffer, framework adapters, etc.)."""

    def set_content_type(self, mime: str) -> None:
        """Set the Content-Type header."""
        ...

    def set_status_header(self, code: int, text: Optional[str] = None) -> None:
        """Set the status line. A missing *text* gets the standard phrase."""
        ...

    def set_output_body(self, body: Any) -> None:
        """Replace the buffered body."""
        ...

    def get_output_body(self) -> Any:
        """Return the buffered body."""
        ...

    def flush(self) -> SentResponse:
        """Write headers and body to the transport and return what was sent."""
        ...


__all__ = ["IOutputSink"]
