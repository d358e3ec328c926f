# =============================================================================
# core/models/challenge.py - Challenge & Result Schemas
# =============================================================================
# These models define the API contract for job challenges:
# - ChallengeResponse: Instructions returned by GET /{slug}/apply
# - ValidationResult: Outcome of POST /{slug}/apply
# - JobSummary: One entry in the list of open positions
# - ApplicationData: Accepted application forwarded to Slack
#
# Fields are snake_case in Python and camelCase on the wire.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that serializes to camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        """Dump using wire names, leaving out optional fields that are unset."""
        return self.model_dump(by_alias=True, exclude_none=True)


class JobSummary(CamelModel):
    """A registered job position."""
    slug: str = Field(..., description="Routing key, e.g. 'intern-junior'")
    level: str = Field(..., description="Human-readable position level")


class ChallengeResponse(CamelModel):
    """
    Instructions for a job challenge.

    Returned as-is by GET /{slug}/apply. The candidate reads the
    instructions and POSTs a submission to the same URL.
    """
    title: str
    description: str
    job_post: str = Field(..., description="Link to the public job post")
    instructions: list[str]
    hints: list[str] | None = None
    example_input: dict[str, Any] | None = None
    example_output: dict[str, Any] | None = None


class ValidationResult(CamelModel):
    """
    Result of validating a submission.

    hints is only present on failures that can be corrected.
    """
    success: bool
    message: str
    hints: list[str] | None = None

    @classmethod
    def ok(cls, message: str) -> "ValidationResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, message: str, hints: list[str]) -> "ValidationResult":
        return cls(success=False, message=message, hints=hints)


class ApplicationData(CamelModel):
    """An accepted application, as forwarded to the notification channel."""
    full_name: str
    email: str
    linkedin_profile: str
    graduation_year: int
    position: str
