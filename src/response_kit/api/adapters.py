"""Bridges between response-kit builders and FastAPI requests/responses."""

from __future__ import annotations

from fastapi import Request, Response

from response_kit.core.config import AppSettings
from response_kit.models import SentResponse
from response_kit.response import ResponseBuilder
from response_kit.sinks.memory_sink import BufferedOutputSink


def to_http_response(sent: SentResponse) -> Response:
    """Convert a flushed :class:`SentResponse` into a FastAPI ``Response``.

    The reason phrase stays on the ``SentResponse``; the ASGI server writes
    the standard phrase for the status code.
    """
    return Response(content=sent.body, status_code=sent.status_code, headers=sent.headers)


def get_response_builder(request: Request) -> ResponseBuilder:
    """FastAPI dependency: a fresh builder per request, configured from app settings."""
    settings: AppSettings = getattr(request.app.state, "settings", None) or AppSettings()
    sink = BufferedOutputSink(charset=settings.response.charset)
    return ResponseBuilder.from_settings(sink, settings.response)
