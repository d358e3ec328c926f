# =============================================================================
# core/jobs/registry.py - Job Challenge Registry
# =============================================================================
# Maps each position slug to its challenge. The set of positions is fixed
# at import time and read-only afterwards.
#
# Usage:
#   from core.jobs.registry import get_job_challenge, get_all_jobs
#
#   challenge = get_job_challenge("intern-junior")
#   if challenge is None:
#       ...  # unknown position, respond 404 with get_all_jobs()
# =============================================================================

from types import MappingProxyType
from typing import Mapping

from core.jobs.base import JobChallenge
from core.jobs.intern_junior import InternJuniorChallenge
from core.models.challenge import JobSummary


def build_registry(challenges: list[JobChallenge]) -> Mapping[str, JobChallenge]:
    """
    Index challenges by slug, in the order given.

    Raises:
        ValueError: If two challenges share a slug
    """
    registry: dict[str, JobChallenge] = {}
    for challenge in challenges:
        if challenge.slug in registry:
            raise ValueError(f"Duplicate job slug: {challenge.slug}")
        registry[challenge.slug] = challenge
    return MappingProxyType(registry)


JOB_CHALLENGES: Mapping[str, JobChallenge] = build_registry([
    InternJuniorChallenge(),
])


def get_job_challenge(slug: str) -> JobChallenge | None:
    """Get the challenge for a slug, or None if no such position exists."""
    return JOB_CHALLENGES.get(slug)


def get_all_jobs() -> list[JobSummary]:
    """List every registered position in registration order."""
    return [challenge.summary() for challenge in JOB_CHALLENGES.values()]


def list_slugs() -> list[str]:
    """List the slugs of every registered position."""
    return list(JOB_CHALLENGES.keys())
