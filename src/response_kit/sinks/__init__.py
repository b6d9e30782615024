"""Output sinks that buffer and flush responses."""

from __future__ import annotations

from response_kit.sinks.memory_sink import BufferedOutputSink, standard_reason
from response_kit.sinks.protocols import IOutputSink

__all__ = ["IOutputSink", "BufferedOutputSink", "standard_reason"]
