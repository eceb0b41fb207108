"""FastAPI app factory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from windrider.api.routes import router as analysis_router
from windrider.config import build_provider
from windrider.fetch import WeatherProvider

logger = logging.getLogger(__name__)


def create_app(
    provider: WeatherProvider | None = None,
    config_dir: Path | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        provider: Weather provider override (testing). Built from env when None.
        config_dir: Override for config directory (testing).
    """
    load_dotenv()

    app = FastAPI(
        title="Windrider API",
        description="Wind and temperature impact on cycling paths",
        version="0.1.0",
    )

    app.state.provider = provider or build_provider()
    app.state.config_dir = config_dir

    if os.environ.get("ENVIRONMENT", "development") == "development":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(analysis_router, prefix="/api")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("Using weather provider %s", type(app.state.provider).__name__)
    return app
