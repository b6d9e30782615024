"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from response_kit.api.middleware.error_handler import register_error_handlers
from response_kit.api.routes import health, respond
from response_kit.core.config import APIConfig, AppSettings
from response_kit.core.startup_checks import validate_settings
from response_kit.logging_config import setup_logging


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("response-kit")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup/shutdown lifecycle."""
    settings = AppSettings()
    validate_settings(settings)
    setup_logging(settings.observability)
    app.state.settings = settings
    yield


def create_app() -> FastAPI:
    api_config = APIConfig()
    app = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(respond.router, prefix="/api")
    return app


app = create_app()
