"""FastAPI application factory for the CosaCode analysis API."""

from __future__ import annotations

from fastapi import FastAPI

from cosacode import __version__
from cosacode.config import CosaCodeConfig


def create_app(config: CosaCodeConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config or CosaCodeConfig.load()

    app = FastAPI(
        title="CosaCode",
        version=__version__,
        docs_url="/api/docs",
    )
    app.state.config = config

    from cosacode.web.api.analyze import router as analyze_router

    app.include_router(analyze_router, prefix="/api")

    return app
