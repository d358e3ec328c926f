# =============================================================================
# core/jobs/intern_junior.py - Intern/Junior Developer Challenge
# =============================================================================
# Candidates POST their details plus a secret derived from their email:
#
#   ENERLAB_<current year>_<EMAIL PREFIX IN UPPERCASE>
#
# Validation order:
#   1. Schema (one hint per invalid field)
#   2. Hybrid work acceptance (rejects before the secret is checked)
#   3. Secret, with hints for the usual mistakes
#   4. Success: notify the hiring channel without waiting
# =============================================================================

import logging
from datetime import date
from typing import Any, Callable

from pydantic import ValidationError

from core.jobs.base import JobChallenge
from core.models.challenge import ApplicationData, ChallengeResponse, ValidationResult
from core.models.submission import InternJuniorSubmission, format_validation_errors

logger = logging.getLogger(__name__)

SECRET_PREFIX = "ENERLAB"

HYBRID_REJECTION_MESSAGE = (
    "This position requires accepting the hybrid work condition "
    "(minimum 2 days on-site in Barra Funda)."
)

Notifier = Callable[[ApplicationData], None]


def _this_year() -> int:
    return date.today().year


def _default_notifier(application: ApplicationData) -> None:
    # Imported lazily so challenges can be built without Slack settings
    from core.services.notification_service import NotificationService
    NotificationService.dispatch_application(application)


def expected_secret(email: str, year: int) -> str:
    """Build the secret a candidate with this email must submit."""
    email_prefix = email.split("@")[0].upper()
    return f"{SECRET_PREFIX}_{year}_{email_prefix}"


def secret_hints(secret: str, email: str, year: int) -> list[str]:
    """
    Explain what is wrong with a secret that doesn't match.

    The first hint is always the expected format; the checks for common
    mistakes are independent and may all apply.
    """
    email_prefix = email.split("@")[0].upper()
    hints = [f"Expected format: {SECRET_PREFIX}_{year}_[EMAIL_PREFIX_IN_UPPERCASE]"]

    if email_prefix.lower() in secret:
        hints.append("The email prefix in the secret should be in UPPERCASE")
    if not secret.startswith(SECRET_PREFIX):
        hints.append(f'The secret should start with "{SECRET_PREFIX}"')
    if str(year) not in secret:
        hints.append(f"The secret should include the current year ({year})")

    return hints


class InternJuniorChallenge(JobChallenge):
    """
    Challenge for the Intern/Junior Developer position.

    Args:
        notifier: Called with the application once it is accepted. Must not
                  block; defaults to a fire-and-forget Slack notification.
        current_year: Clock used for the secret and graduation year rules
    """

    slug = "intern-junior"
    level = "Intern/Junior Developer"

    def __init__(
        self,
        notifier: Notifier | None = None,
        current_year: Callable[[], int] = _this_year,
    ):
        self._notifier = notifier or _default_notifier
        self._current_year = current_year

    def get_challenge(self) -> ChallengeResponse:
        year = self._current_year()
        return ChallengeResponse(
            title="Intern/Junior Developer Challenge - Enerlab",
            description=(
                "Apply for our Intern/Junior Developer position. This is a HYBRID role "
                "requiring at least 2 days on-site in Barra Funda, São Paulo."
            ),
            job_post="https://www.linkedin.com/hiring/jobs/4270192595/detail/",
            instructions=[
                "To apply, make a POST request to this same endpoint",
                "The request body should be a JSON with the following fields:",
                "1. fullName: Your complete name",
                "2. email: Your email address",
                "3. linkedinProfile: Your LinkedIn profile URL",
                "4. graduationYear: Your expected graduation year (must be current year or next year)",
                "5. acceptsHybrid: Boolean indicating if you accept the hybrid work condition "
                "(min 2 days on-site in Barra Funda)",
                "6. secret: Generate a secret by concatenating:",
                f'   - The word "{SECRET_PREFIX}"',
                '   - followed by underscore "_"',
                "   - followed by the current year",
                '   - followed by underscore "_"',
                "   - followed by your email (before the @) in UPPERCASE",
                "",
                f"Example: If your email is john.doe@email.com, the secret would be: "
                f"{expected_secret('john.doe@email.com', year)}",
            ],
            hints=[
                "Make sure your LinkedIn URL is complete (https://www.linkedin.com/in/...)",
                f"The secret should follow the exact format: {SECRET_PREFIX}_YEAR_EMAILPREFIX",
                "Email prefix means everything before the @ symbol",
                "Convert the email prefix to UPPERCASE",
                "This position requires on-site presence in Barra Funda at least 2 days per week",
            ],
            example_input={
                "fullName": "João Silva",
                "email": "joao.silva@email.com",
                "linkedinProfile": "https://www.linkedin.com/in/joaosilva",
                "graduationYear": year,
                "acceptsHybrid": True,
                "secret": expected_secret("joao.silva@email.com", year),
            },
        )

    def get_schema(self) -> type[InternJuniorSubmission]:
        return InternJuniorSubmission

    def validate_solution(self, data: Any) -> ValidationResult:
        try:
            year = self._current_year()
            parsed = InternJuniorSubmission.model_validate(data, context={"current_year": year})

            if not parsed.accepts_hybrid:
                return ValidationResult.fail(
                    HYBRID_REJECTION_MESSAGE,
                    ["You must accept the hybrid work condition to proceed with the application"],
                )

            if parsed.secret != expected_secret(parsed.email, year):
                return ValidationResult.fail(
                    "The secret is incorrect. Please follow the instructions carefully.",
                    secret_hints(parsed.secret, parsed.email, year),
                )

            application = ApplicationData(
                full_name=parsed.full_name,
                email=parsed.email,
                linkedin_profile=parsed.linkedin_profile,
                graduation_year=parsed.graduation_year,
                position=self.level,
            )
            self._notifier(application)
            logger.info(f"Accepted {self.slug} application from {parsed.email}")

            return ValidationResult.ok(
                f"Application received successfully! Welcome {parsed.full_name}. "
                f"Your application for the {self.level} position has been submitted. "
                f"We will contact you at {parsed.email} for the next steps."
            )

        except ValidationError as e:
            return ValidationResult.fail(
                "Invalid submission. Please check the errors below:",
                format_validation_errors(e),
            )
        except Exception as e:
            logger.exception(f"Unexpected error validating {self.slug} submission: {e}")
            return ValidationResult.fail(
                "An unexpected error occurred. Please check your submission format.",
                ["Ensure your submission is valid JSON with all required fields"],
            )
