# =============================================================================
# core/models/submission.py - Submission Schemas
# =============================================================================
# Pydantic schemas that candidate submissions are validated against.
#
# Every rule reports a human-readable message so a failed submission can be
# turned into one hint per field:
#   "email: Invalid email format"
#
# Year-dependent rules read the current year from the validation context:
#   InternJuniorSubmission.model_validate(data, context={"current_year": 2025})
# =============================================================================

from datetime import date
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AnyUrl,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from core.models.challenge import CamelModel

_URL_ADAPTER = TypeAdapter(AnyUrl)

LINKEDIN_DOMAIN = "linkedin.com"


def _current_year(info: ValidationInfo) -> int:
    context = info.context or {}
    return int(context.get("current_year") or date.today().year)


class InternJuniorSubmission(CamelModel):
    """
    Application payload for the Intern/Junior Developer position.

    Wire format:
        {
            "fullName": "João Silva",
            "email": "joao.silva@email.com",
            "linkedinProfile": "https://www.linkedin.com/in/joaosilva",
            "graduationYear": 2025,
            "acceptsHybrid": true,
            "secret": "ENERLAB_2025_JOAO.SILVA"
        }
    """

    # Submissions must use the camelCase wire names
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=False)

    full_name: StrictStr
    email: StrictStr
    linkedin_profile: StrictStr
    graduation_year: int = Field(..., description="Current year or next year")
    accepts_hybrid: StrictBool
    secret: StrictStr

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, value: str) -> str:
        if len(value) < 3:
            raise ValueError("Full name must have at least 3 characters")
        return value

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, value: str) -> str:
        # Bare addresses only; display-name forms like "Name <a@b.com>" are rejected
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Invalid email format")
        return value

    @field_validator("linkedin_profile")
    @classmethod
    def validate_linkedin_profile(cls, value: str) -> str:
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError:
            raise ValueError("Invalid LinkedIn URL")
        if LINKEDIN_DOMAIN not in value:
            raise ValueError("Must be a LinkedIn URL")
        return value

    @field_validator("graduation_year", mode="before")
    @classmethod
    def validate_graduation_year_type(cls, value: Any) -> int:
        # JSON numbers only; booleans and numeric strings are rejected
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("Graduation year must be a number")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError("Graduation year must be an integer")
            value = int(value)
        return value

    @field_validator("graduation_year")
    @classmethod
    def validate_graduation_year_range(cls, value: int, info: ValidationInfo) -> int:
        year = _current_year(info)
        if value < year:
            raise ValueError(f"Graduation year must be {year} or later")
        if value > year + 1:
            raise ValueError(f"Graduation year must be at most {year + 1}")
        return value


# =============================================================================
# Error Formatting
# =============================================================================

def format_validation_errors(error: ValidationError) -> list[str]:
    """
    Turn a pydantic ValidationError into one "<field path>: <message>" hint per issue.

    Messages raised by our own validators are used verbatim; missing fields
    are reported as "Required" and a body that isn't a JSON object as
    "Expected object".
    """
    hints = []
    for issue in error.errors():
        path = ".".join(str(part) for part in issue["loc"])
        if issue["type"] == "missing":
            message = "Required"
        elif issue["type"] in ("model_type", "model_attributes_type"):
            message = "Expected object"
        elif issue["type"] == "value_error":
            message = str(issue["ctx"]["error"])
        else:
            message = issue["msg"]
        hints.append(f"{path}: {message}" if path else message)
    return hints
