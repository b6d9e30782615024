"""JSON formatter: the only formatter registered by default."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel


def _default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    return str(value)


def json_format(data: Any) -> str:
    """Serialize *data* to compact JSON text, e.g. ``{"foo":"bar"}``.

    Non-ASCII characters are escaped as ``\\uXXXX``. Pydantic models are
    dumped in JSON mode; anything else unknown falls back to ``str()``.

    Raises:
        ValueError: if *data* contains NaN or an infinite float.
    """
    return json.dumps(data, separators=(",", ":"), allow_nan=False, default=_default)
