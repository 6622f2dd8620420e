"""Default format predicates.

Pure, total functions: any input, including non-strings, yields a bool.
The embedding application may supply its own instead.
"""

from typing import Any, Callable, Optional

from email_validator import EmailNotValidError, validate_email

from signup_validator.config import get_settings


def is_valid_email_format(text: Any) -> bool:
    """RFC syntax check only, no DNS lookup.

    The library's normalized address is discarded; callers keep the raw text.
    """
    if not isinstance(text, str):
        return False
    try:
        validate_email(text, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_password_format(text: Any, min_length: Optional[int] = None) -> bool:
    """Password is acceptable when it has at least min_length characters.

    min_length defaults to the PASSWORD_MIN_LENGTH setting.
    """
    if not isinstance(text, str):
        return False
    if min_length is None:
        min_length = get_settings().PASSWORD_MIN_LENGTH
    return len(text) >= min_length


def password_rule(min_length: int) -> Callable[[Any], bool]:
    """Build a one-argument password predicate with a fixed minimum length."""
    if min_length < 1:
        raise ValueError(f"min_length must be at least 1, got {min_length}")

    def predicate(text: Any) -> bool:
        return is_valid_password_format(text, min_length=min_length)

    return predicate
