"""Nested pydantic-settings configuration for response-kit.

Each group reads its own ``RESPONSE_KIT_<GROUP>_*`` env vars::

    export RESPONSE_KIT_RESPONSE_DEFAULT_FORMAT=html
    export RESPONSE_KIT_RESPONSE_CONTENT_TYPES='{"html": "text/html"}'
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class ResponseConfig(BaseSettings):
    """Defaults applied to every :class:`ResponseBuilder` built from settings.

    ``content_types`` is merged over the built-in table, so an entry here
    adds a format or overrides the JSON MIME string.
    """

    model_config = {"env_prefix": "RESPONSE_KIT_RESPONSE_"}

    default_format: str = "json"
    content_types: dict[str, str] = Field(default_factory=dict)
    charset: Optional[str] = None
    json_fallback: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``RESPONSE_KIT_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "RESPONSE_KIT_OBSERVABILITY_"}

    service_name: str = "response-kit"
    log_level: str = "INFO"


class APIConfig(BaseSettings):
    """FastAPI application metadata.

    Env vars use ``RESPONSE_KIT_API_`` prefix.
    """

    model_config = {"env_prefix": "RESPONSE_KIT_API_"}

    title: str = "response-kit"
    description: str = "Format-aware HTTP response builder"


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    response: ResponseConfig = ResponseConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
    api: APIConfig = APIConfig()
