# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Error bodies always tell the client where to go next (e.g. which job
# slugs exist), not just what failed.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.jobs.registry import get_all_jobs

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /{slug}/apply",
    "POST /{slug}/apply",
]


def available_jobs() -> list[dict[str, str]]:
    """Registered positions as JSON-ready dicts."""
    return [job.to_json_dict() for job in get_all_jobs()]


class EnerlabJobsException(Exception):
    """
    Base exception for the Enerlab Jobs API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "ENERLAB_JOBS_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message, **self.details}


class JobNotFoundError(EnerlabJobsException):
    """Raised when a job slug isn't registered."""

    def __init__(self):
        super().__init__(
            message="Job position not found",
            code="JOB_NOT_FOUND",
            status_code=404,
            details={"availableJobs": available_jobs()},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def enerlab_jobs_exception_handler(
    request: Request,
    exc: EnerlabJobsException
) -> JSONResponse:
    """Convert EnerlabJobsException to JSON response."""
    logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def not_found_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing errors.

    Unknown paths and unsupported methods both get the "Not found" body
    listing what the API does serve.
    """
    if exc.status_code not in (404, 405):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    logger.debug(f"No route for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=404,
        content={
            "error": "Not found",
            "availableEndpoints": AVAILABLE_ENDPOINTS,
            "availableJobs": available_jobs(),
        }
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
