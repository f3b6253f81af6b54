# app/error_handler.py
"""Global exception handlers.

Malformed requests are reported as 400 with the offending fields, and
anything unexpected becomes a generic 500 so internals are not leaked
unless DEBUG is on.
"""

import logging
from typing import Any, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.utils.responses import create_error_response

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def summarize_validation_errors(errors: List[Any]) -> str:
    """Turn pydantic error dicts into a short 'field: message' list."""
    parts = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", []) if part != "body"]
        field = ".".join(loc) if loc else "body"
        parts.append(f"{field}: {error.get('msg', 'Invalid value')}")
    return "; ".join(parts[:3])


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Validation error for {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": create_error_response(
                message="Invalid employee data",
                details=summarize_validation_errors(exc.errors()),
            )
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information.

    Args:
        request: FastAPI request
        exc: Unexpected exception

    Returns:
        JSONResponse with generic error
    """
    logger.error(f"Unhandled exception for {request.url}: {exc}", exc_info=True)

    if get_settings().DEBUG:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "type": type(exc).__name__},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
