"""Validation report — a serializable view of a validation result for callers."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from signup_validator.validators.models import FailureReason
from signup_validator.validators.results import Result


class FieldError(BaseModel):
    """A single reported failure."""

    reason: FailureReason
    field: str                        # Which input field was rejected
    message: str
    suggestion: Optional[str] = None  # How to fix it

    model_config = ConfigDict(use_enum_values=True)


# Fixed wording per reason: (field, message, suggestion)
FAILURE_DETAILS: dict[FailureReason, tuple[str, str, str]] = {
    FailureReason.INVALID_EMAIL_FORMAT: (
        "email",
        "Email address is not in a valid format",
        "Use an address of the form name@domain.tld",
    ),
    FailureReason.BLACKLISTED_EMAIL: (
        "email",
        "Email address is not allowed",
        "Sign up with a different email address",
    ),
    FailureReason.INVALID_PASSWORD_FORMAT: (
        "password",
        "Password does not meet the password rules",
        "Choose a longer password",
    ),
}


class ValidationReport(BaseModel):
    """Outcome of validating one record, ready for model_dump()."""

    passed: bool
    reasons: list[str] = Field(default_factory=list, description="Reason tags in evaluation order")
    errors: list[FieldError] = Field(default_factory=list)

    @classmethod
    def build(cls, result: Result) -> "ValidationReport":
        """Build a report from a validate() result. Order of reasons is preserved."""
        if result.is_success:
            return cls(passed=True)

        errors = []
        for reason in result.error.reasons:
            field, message, suggestion = FAILURE_DETAILS[reason]
            errors.append(FieldError(reason=reason, field=field, message=message, suggestion=suggestion))

        return cls(
            passed=False,
            reasons=[reason.value for reason in result.error.reasons],
            errors=errors,
        )
