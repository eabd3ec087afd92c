"""httpbin-app: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map HttpbinError → {"error": {"message": ...}}
    - CORS configured from settings (not hardcoded)
    - The Settings passed to create_app are the only tunables handlers see

Design Decisions:
    - create_app factory so tests build apps with their own delay ceiling /
      stream interval; module-level `app` for `uvicorn httpbin_app.main:app`
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from httpbin_app.api.error_handlers import register_error_handlers
from httpbin_app.api.routes import (
    auth, cache, cookies, dynamic, echo, encoding, redirects,
    static_pages, status_codes,
)
from httpbin_app.config import Settings, get_settings
from httpbin_app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the fixture app around one Settings instance."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("httpbin-app started")
        yield
        logger.info("httpbin-app shutting down")

    app = FastAPI(
        title="httpbin-app", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(static_pages.router)
    app.include_router(echo.router)
    app.include_router(redirects.router)
    app.include_router(status_codes.router)
    app.include_router(dynamic.router)
    app.include_router(cookies.router)
    app.include_router(cache.router)
    app.include_router(encoding.router)
    app.include_router(auth.router)

    register_error_handlers(app)
    return app


app = create_app()
