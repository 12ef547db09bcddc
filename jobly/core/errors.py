"""
Centralized error handlers for FastAPI.

Maps Jobly errors to HTTP responses of the form
{"error": {"message": ..., "status": ...}}.
No stack traces or internal details are exposed to clients.
"""

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobly.core.exceptions import ErrorMessage, JoblyError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def _error_response(status_code: int, message: ErrorMessage) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


def format_validation_errors(exc: RequestValidationError) -> List[str]:
    """Flatten every pydantic violation into one readable line each."""
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return messages


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(JoblyError)
    async def handle_jobly_error(request: Request, exc: JoblyError) -> JSONResponse:
        """Handle typed errors raised by crud code, helpers and auth guards."""
        logger.warning(
            "%s (%d): %s", type(exc).__name__, exc.status_code, exc,
            extra={"status": exc.status_code, "path": request.url.path},
        )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(_request: Request, exc: RequestValidationError) -> JSONResponse:
        """Collect all schema violations into a single bad request."""
        messages = format_validation_errors(exc)
        logger.warning("Request validation failed: %s", messages)
        return _error_response(HTTP_400, messages)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Routing errors (unknown path, wrong method) in the same envelope."""
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
