"""Error Handlers: global exception handlers.

Invariants:
    - HttpbinError → its http_status + {"error": {"message": ...}}
    - RequestValidationError → 400 with the same envelope plus field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (HttpbinError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from httpbin_app.api.responses import PrettyJSONResponse
from httpbin_app.core.errors import HttpbinError, error_envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_httpbin_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_httpbin_error_handler(app: FastAPI) -> None:

    @app.exception_handler(HttpbinError)
    async def httpbin_error_handler(request: Request, exc: HttpbinError):
        """Handle all handler-level errors."""
        logger.error(
            f"HttpbinError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return PrettyJSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed query parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return PrettyJSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PrettyJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope("An unexpected error occurred"),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Error envelope with one entry per invalid field."""
    response = error_envelope("Invalid request data")
    response["error"]["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return response
