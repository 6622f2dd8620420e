"""Record Validator — validates each field independently, then combines the outcomes.

This is the main entry point for signup validation.

Usage:
    validator = RecordValidator()
    result = validator.validate(RawRecord(email="a@b.com", password="secret123"))
    if not result.is_success:
        # result.error.reasons lists every failure, email first
"""

import time
from typing import Any, Callable, Container, Optional, Union

import structlog

from signup_validator.validators.blacklist import Denylist, check_not_blacklisted
from signup_validator.validators.combine import combine
from signup_validator.validators.constructors import make_email, make_password
from signup_validator.validators.models import FailureReason, RawRecord, ValidatedRecord
from signup_validator.validators.predicates import is_valid_email_format, is_valid_password_format
from signup_validator.validators.results import Result, to_reason_list_or

logger = structlog.get_logger()


class RecordValidator:
    """Validates RawRecords against injected predicates and a denylist.

    Design principles:
        - Pure: same record -> equal result, no shared mutable state
        - Accumulating: independent field failures are all reported
        - Ordered: email reasons always precede password reasons
    """

    def __init__(
        self,
        email_predicate: Callable[[Any], bool] = is_valid_email_format,
        password_predicate: Callable[[Any], bool] = is_valid_password_format,
        denylist: Optional[Container[str]] = None,
    ):
        """Initialize with default collaborators or custom ones.

        Args:
            email_predicate: Email format rule
            password_predicate: Password format rule
            denylist: Known-bad addresses. If None, EMAIL_DENYLIST is read on each lookup.
        """
        self.email_predicate = email_predicate
        self.password_predicate = password_predicate
        self.denylist = denylist if denylist is not None else Denylist.from_settings()

    def validate_email(self, raw: str) -> Result:
        """Format check, then the dependent blacklist check."""
        return to_reason_list_or(
            make_email(raw, self.email_predicate),
            FailureReason.INVALID_EMAIL_FORMAT,
        ).and_then(lambda email: check_not_blacklisted(email, self.denylist))

    def validate_password(self, raw: str) -> Result:
        return to_reason_list_or(
            make_password(raw, self.password_predicate),
            FailureReason.INVALID_PASSWORD_FORMAT,
        )

    def validate(self, record: Union[RawRecord, dict]) -> Result:
        """Validate a whole record.

        Args:
            record: RawRecord, or a dict with 'email' and 'password' keys

        Returns:
            Success(ValidatedRecord) or Failure(FailureCollection) with every reason
        """
        start_time = time.perf_counter()

        if isinstance(record, dict):
            record = RawRecord.model_validate(record)

        email_result = self.validate_email(record.email)
        password_result = self.validate_password(record.password)
        result = combine(email_result, password_result, ValidatedRecord.build)

        logger.info(
            "record_validated",
            passed=result.is_success,
            reasons=[] if result.is_success else [r.value for r in result.error.reasons],
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return result


# Module-level default, built from settings
record_validator = RecordValidator()


def validate(record: Union[RawRecord, dict]) -> Result:
    """Validate with the default RecordValidator."""
    return record_validator.validate(record)
