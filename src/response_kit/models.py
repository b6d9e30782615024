"""Pydantic data models for response-kit."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SentResponse(BaseModel):
    """A flushed response: the terminal result of ``ResponseBuilder.send()``.

    Request handlers return it up the call stack instead of halting the
    process, so the surrounding server keeps serving other requests.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = 200
    reason: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""

    @property
    def status_line(self) -> str:
        return f"HTTP/1.1 {self.status_code} {self.reason}".rstrip()

    @property
    def content_type(self) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value
        return None

    def json_body(self) -> Any:
        """Decode the body as JSON. Raises ``ValueError`` if it is not JSON."""
        return json.loads(self.body)


__all__ = ["SentResponse"]
