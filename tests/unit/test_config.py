"""Tests for settings and startup validation."""

from __future__ import annotations

import logging

import pytest

from response_kit.core.config import AppSettings, ObservabilityConfig, ResponseConfig
from response_kit.core.startup_checks import validate_settings


class TestResponseConfig:
    def test_defaults(self) -> None:
        config = ResponseConfig()
        assert config.default_format == "json"
        assert config.content_types == {}
        assert config.charset is None
        assert config.json_fallback is True

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESPONSE_KIT_RESPONSE_DEFAULT_FORMAT", "html")
        monkeypatch.setenv("RESPONSE_KIT_RESPONSE_CONTENT_TYPES", '{"html": "text/html"}')
        monkeypatch.setenv("RESPONSE_KIT_RESPONSE_JSON_FALLBACK", "false")
        config = ResponseConfig()
        assert config.default_format == "html"
        assert config.content_types == {"html": "text/html"}
        assert config.json_fallback is False

    def test_observability_defaults(self) -> None:
        assert ObservabilityConfig().log_level == "INFO"


class TestValidateSettings:
    def test_accepts_defaults(self) -> None:
        validate_settings(AppSettings(response=ResponseConfig()))

    def test_rejects_blank_mime(self) -> None:
        settings = AppSettings(response=ResponseConfig(content_types={"html": "  "}))
        with pytest.raises(ValueError, match="empty MIME type for 'html'"):
            validate_settings(settings)

    def test_warns_on_unhandled_default_format(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = AppSettings(response=ResponseConfig(default_format="xml"))
        with caplog.at_level(logging.WARNING, logger="response_kit.core.startup_checks"):
            validate_settings(settings)
        assert "has no formatter and no content type" in caplog.text

    def test_no_warning_when_content_type_configured(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = AppSettings(
            response=ResponseConfig(default_format="html", content_types={"html": "text/html"})
        )
        with caplog.at_level(logging.WARNING, logger="response_kit.core.startup_checks"):
            validate_settings(settings)
        assert caplog.text == ""
