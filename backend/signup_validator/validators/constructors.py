"""Smart constructors — the only sanctioned way to build validated field values."""

from typing import Any, Callable, Optional

from signup_validator.validators.models import ValidatedEmail, ValidatedPassword
from signup_validator.validators.predicates import is_valid_email_format, is_valid_password_format

Predicate = Callable[[Any], bool]


def make_email(raw: str, is_valid: Predicate = is_valid_email_format) -> Optional[ValidatedEmail]:
    """Wrap raw text as a ValidatedEmail, or return None if it fails the predicate.

    The text is kept exactly as given.
    """
    if not is_valid(raw):
        return None
    return ValidatedEmail(value=raw)


def make_password(raw: str, is_valid: Predicate = is_valid_password_format) -> Optional[ValidatedPassword]:
    """Wrap raw text as a ValidatedPassword, or return None if it fails the predicate."""
    if not is_valid(raw):
        return None
    return ValidatedPassword(value=raw)
