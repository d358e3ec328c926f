# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - challenge.py: Challenge instructions, validation results, job summaries
# - submission.py: Candidate submission schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .challenge import (
    ApplicationData,
    ChallengeResponse,
    JobSummary,
    ValidationResult,
)
from .submission import InternJuniorSubmission, format_validation_errors

__all__ = [
    "ApplicationData",
    "ChallengeResponse",
    "JobSummary",
    "ValidationResult",
    "InternJuniorSubmission",
    "format_validation_errors",
]
