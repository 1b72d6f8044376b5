#!/usr/bin/env python3
"""
Error handlers for the web application.

Engine exceptions are mapped to HTTP status codes here; the engine itself
knows nothing about HTTP.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.exceptions import (
    MatchingError,
    SkillValidationError,
    JobNotFoundError,
    MatchingTimeoutError
)

logger = logging.getLogger(__name__)


def status_code_for(exc: MatchingError) -> int:
    """HTTP status for an engine exception."""
    if isinstance(exc, JobNotFoundError):
        return 404
    if isinstance(exc, SkillValidationError):
        return 400
    if isinstance(exc, MatchingTimeoutError):
        return 504
    return 500


async def service_exception_handler(
    request: Request,
    exc: MatchingError
) -> JSONResponse:
    """
    Handle matching engine exceptions.

    Args:
        request: The FastAPI request.
        exc: The engine exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"Rejected request to {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
