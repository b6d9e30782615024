"""Render an arbitrary payload through a ResponseBuilder."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from response_kit.api.adapters import get_response_builder, to_http_response
from response_kit.response import ResponseBuilder

log = logging.getLogger(__name__)

router = APIRouter(tags=["respond"])


class RespondRequest(BaseModel):
    """Request body for POST /respond."""

    format: str = "json"
    data: Any = None
    status_code: Optional[int] = None
    status_text: Optional[str] = None


@router.post("/respond")
def respond(
    payload: RespondRequest,
    response: ResponseBuilder = Depends(get_response_builder),
) -> Response:
    """Serialize ``payload.data`` in ``payload.format`` with the requested status."""
    if payload.status_code is not None:
        response.set_status_code(payload.status_code, payload.status_text)
    sent = response.set_format(payload.format).set_data(payload.data).send()
    return to_http_response(sent)
