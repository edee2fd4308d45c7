"""Error Handlers — global exception handlers that shape every error as {"error": <message>}.

Invariants:
    - SampleServiceError → its http_status + to_response()
    - Framework 404/405 (no route for path or method) → 404 "Route not found"
    - RequestValidationError → 400 "Invalid request"
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Handlers are the route-table fallback: unmatched requests never reach a handler
    - Unsupported method on a known path is a 404, not a 405: callers see one miss shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cicd_sample.core.errors import (
    ErrorContext, InternalServiceError, RouteNotFoundError, SampleServiceError,
)

logger = logging.getLogger(__name__)

_ROUTE_MISS_STATUSES = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(exc: SampleServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_service_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(SampleServiceError)
    async def service_error_handler(request: Request, exc: SampleServiceError):
        logger.warning(
            f"{exc.code}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return _error_response(exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register the fallback for requests no route matched."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in _ROUTE_MISS_STATUSES:
            err = RouteNotFoundError(ErrorContext(path=request.url.path))
            logger.info(
                f"No route for {request.method} {request.url.path}",
                extra={"error_code": err.code, "path": request.url.path},
            )
            return _error_response(err)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return _error_response(InternalServiceError(ErrorContext(path=request.url.path)))
