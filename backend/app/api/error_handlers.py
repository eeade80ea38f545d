"""Error Handlers — global exception handlers for the ResponseRift API.

Invariants:
    - ResponseRiftError → its own envelope ("error" str or "errors" list) + http_status
    - RequestValidationError (bad query/path params) → 400 {"errors": [...]}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ResponseRiftError), validation (FastAPI), catch-all (Exception)
    - 4xx domain errors logged at warning, everything else at error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from app.api.responses import PrettyJSONResponse
from app.core.errors import ResponseRiftError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ResponseRiftError)
    async def domain_error_handler(request: Request, exc: ResponseRiftError):
        """Handle all ResponseRift domain errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "resource": exc.context.resource,
            },
        )
        return PrettyJSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed query/path parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return PrettyJSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PrettyJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "errors": [
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
            for e in exc.errors()
        ],
    }
