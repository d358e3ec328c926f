# =============================================================================
# core/jobs/base.py - Job Challenge Interface
# =============================================================================
# Every open position is a JobChallenge: human-readable instructions plus a
# validation function for the candidate's submission.
# =============================================================================

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from core.models.challenge import ChallengeResponse, JobSummary, ValidationResult


class JobChallenge(ABC):
    """
    Base class for job challenges.

    Subclasses set `slug` (routing key) and `level` (display name) and
    implement the three methods below.
    """

    slug: str
    level: str

    @abstractmethod
    def get_challenge(self) -> ChallengeResponse:
        """Return the challenge instructions. Must not have side effects."""

    @abstractmethod
    def validate_solution(self, data: Any) -> ValidationResult:
        """
        Validate a submission.

        Never raises: every failure is reported as a ValidationResult.
        """

    @abstractmethod
    def get_schema(self) -> type[BaseModel]:
        """Return the pydantic model submissions are validated against."""

    def summary(self) -> JobSummary:
        return JobSummary(slug=self.slug, level=self.level)
