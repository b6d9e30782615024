"""Global exception handlers mapping response-kit exceptions to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from response_kit.exceptions import (
    FormatterNotFoundError,
    InvalidStatusCodeError,
    ResponseAlreadySentError,
    ResponseKitError,
)

log = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(InvalidStatusCodeError)
    async def handle_invalid_status(request: Request, exc: InvalidStatusCodeError) -> JSONResponse:
        log.warning(f"Rejected status code {exc.status_code!r} on {request.url.path}")
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "invalid_status_code"})

    @app.exception_handler(ResponseAlreadySentError)
    async def handle_already_sent(request: Request, exc: ResponseAlreadySentError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "response_already_sent"})

    @app.exception_handler(FormatterNotFoundError)
    async def handle_missing_formatter(request: Request, exc: FormatterNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "formatter_not_found"})

    @app.exception_handler(ResponseKitError)
    async def handle_generic_error(request: Request, exc: ResponseKitError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "response_kit_error"})
