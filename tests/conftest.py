"""Shared fixtures for response-kit tests."""

from __future__ import annotations

import logging
import os

import pytest
import structlog

from response_kit.response import ResponseBuilder
from response_kit.sinks.memory_sink import BufferedOutputSink
from tests.fakes.fake_sink import FakeOutputSink


@pytest.fixture
def fake_sink() -> FakeOutputSink:
    return FakeOutputSink()


@pytest.fixture
def builder(fake_sink: FakeOutputSink) -> ResponseBuilder:
    """Builder bound to a recording sink."""
    return ResponseBuilder(fake_sink)


@pytest.fixture
def buffered_sink() -> BufferedOutputSink:
    return BufferedOutputSink()


@pytest.fixture
def buffered_builder(buffered_sink: BufferedOutputSink) -> ResponseBuilder:
    return ResponseBuilder(buffered_sink)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RESPONSE_KIT_* env vars from the host out of settings-based tests."""
    for key in list(os.environ):
        if key.startswith("RESPONSE_KIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def _restore_logging():
    """Undo root-logger and structlog changes made by ``setup_logging``."""
    root = logging.getLogger()
    package = logging.getLogger("response_kit")
    handlers, level, package_level = list(root.handlers), root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
