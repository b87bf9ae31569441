"""Global exception handlers.

Every ``AppError`` is rendered as::

    {"error": {"code": ..., "message": ..., "request_id": ..., "details": ...}}

with the status code declared on its class. Anything else falls through to a
generic 500 that never exposes the original message.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from interview_prep.core.errors import AppError
from interview_prep.core.logging import get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def _error_body(code: str, message: str, details: dict | None = None) -> dict:
    error: dict = {"code": code, "message": message, "request_id": get_request_id()}
    if details:
        error["details"] = details
    return {"error": error}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render a domain error with the status code of its class.

    Client faults (4xx) are logged as warnings, server faults as errors.
    """
    status_code = exc.status_code
    level = logging.ERROR if status_code >= 500 else logging.WARNING

    logger.log(
        level,
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "status_code": status_code,
            "has_details": bool(exc.details),
            "request_path": request.url.path,
        },
    )

    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.code, exc.message, exc.details),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for unexpected errors; the client only sees a generic message."""
    logger.error(
        "unhandled_exception",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "request_path": request.url.path,
            "request_method": request.method,
        },
    )

    return JSONResponse(
        status_code=500,
        content=_error_body("internal_server_error", INTERNAL_ERROR_MESSAGE),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
