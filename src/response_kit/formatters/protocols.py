"""Formatter protocol: the contract every per-format serializer implements."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFormatter(Protocol):
    """A callable mapping response data to a serialized body string."""

    def __call__(self, data: Any) -> str:
        ...


__all__ = ["IFormatter"]
