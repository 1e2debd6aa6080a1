"""
API exception handlers.

Request validation failures are reported as 400 with the shared
field -> messages map, matching what the client-side form shows.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from prereg.api.models import ErrorResponse
from prereg.schemas import field_errors

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, details: dict[str, list[str]] | str | None = None) -> JSONResponse:
    """JSON error body in the ``{"error": ..., "details": ...}`` shape."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = field_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, details)
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", details)


def install_exception_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
