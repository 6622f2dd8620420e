"""Signup record validation — smart constructors, tagged failures, accumulating combination.

Usage:
    from signup_validator.validators import validate, RawRecord

    result = validate(RawRecord(email="good@example.com", password="GoodPass123"))
    if not result.is_success:
        # result.error.reasons holds every failure, email first
"""

from signup_validator.validators.blacklist import Denylist, check_not_blacklisted
from signup_validator.validators.combine import combine, combine_all
from signup_validator.validators.constructors import make_email, make_password
from signup_validator.validators.engine import RecordValidator, record_validator, validate
from signup_validator.validators.models import (
    FailureCollection,
    FailureReason,
    RawRecord,
    ValidatedEmail,
    ValidatedPassword,
    ValidatedRecord,
)
from signup_validator.validators.predicates import (
    is_valid_email_format,
    is_valid_password_format,
    password_rule,
)
from signup_validator.validators.report import FieldError, ValidationReport
from signup_validator.validators.results import (
    Failure,
    Result,
    Success,
    to_reason_list_or,
    to_reason_or,
)

__all__ = [
    "Denylist",
    "check_not_blacklisted",
    "combine",
    "combine_all",
    "make_email",
    "make_password",
    "RecordValidator",
    "record_validator",
    "validate",
    "FailureCollection",
    "FailureReason",
    "RawRecord",
    "ValidatedEmail",
    "ValidatedPassword",
    "ValidatedRecord",
    "is_valid_email_format",
    "is_valid_password_format",
    "password_rule",
    "FieldError",
    "ValidationReport",
    "Failure",
    "Result",
    "Success",
    "to_reason_list_or",
    "to_reason_or",
]
