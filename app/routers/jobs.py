# =============================================================================
# app/routers/jobs.py - Job Application Endpoints
# =============================================================================
# GET  /{slug}/apply - challenge instructions for a position
# POST /{slug}/apply - submit a solution to the challenge
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Request
from fastapi.responses import JSONResponse

from app.exceptions import JobNotFoundError
from core.jobs.base import JobChallenge
from core.jobs.registry import get_job_challenge
from core.models.challenge import ChallengeResponse, ValidationResult

logger = logging.getLogger(__name__)

router = APIRouter()

SlugPath = Annotated[str, Path(description="Job position slug, e.g. intern-junior")]


def _resolve(slug: str) -> JobChallenge:
    challenge = get_job_challenge(slug)
    if challenge is None:
        raise JobNotFoundError()
    return challenge


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "/{slug}/apply",
    response_model=ChallengeResponse,
    response_model_exclude_none=True,
)
async def get_challenge(slug: SlugPath):
    """
    Get the challenge for a job position.

    Returns instructions, hints and an example submission.
    """
    return _resolve(slug).get_challenge()


@router.post(
    "/{slug}/apply",
    response_model=ValidationResult,
    responses={400: {"model": ValidationResult}},
)
async def apply(slug: SlugPath, request: Request):
    """
    Submit a solution to a job challenge.

    Returns 200 when the application is accepted, 400 with hints otherwise.
    """
    challenge = _resolve(slug)

    try:
        body = await request.json()
    except ValueError:
        result = ValidationResult.fail(
            "Invalid request format",
            ["Please submit valid JSON in the request body"],
        )
        return JSONResponse(status_code=400, content=result.to_json_dict())

    result = challenge.validate_solution(body)
    if not result.success:
        logger.info(f"Rejected {slug} submission: {result.message}")

    return JSONResponse(
        status_code=200 if result.success else 400,
        content=result.to_json_dict(),
    )
