"""Blacklist check — the dependent validation step that follows email format validation.

The denylist is any container supporting `in`; Denylist is the default,
built from the EMAIL_DENYLIST setting.
"""

from typing import Container, Iterable, Optional

from signup_validator.config import Settings, get_settings
from signup_validator.validators.models import FailureCollection, FailureReason, ValidatedEmail
from signup_validator.validators.results import Failure, Result, Success


class Denylist:
    """Known-bad email addresses. Membership is exact and case-sensitive.

    With no addresses given, the EMAIL_DENYLIST setting is read on every
    lookup, so it tracks settings the same way the password rule does.
    """

    def __init__(self, addresses: Optional[Iterable[str]] = None):
        self._addresses = frozenset(addresses) if addresses is not None else None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Denylist":
        """Snapshot of the given settings, or a live view of the current ones."""
        if settings is None:
            return cls()
        return cls(settings.EMAIL_DENYLIST)

    @property
    def addresses(self) -> frozenset[str]:
        if self._addresses is None:
            return frozenset(get_settings().EMAIL_DENYLIST)
        return self._addresses

    def __contains__(self, address: object) -> bool:
        return address in self.addresses

    def __len__(self) -> int:
        return len(self.addresses)

    def __repr__(self) -> str:
        if self._addresses is None:
            return "Denylist(<settings>)"
        return f"Denylist({sorted(self._addresses)!r})"


def check_not_blacklisted(email: ValidatedEmail, denylist: Container[str]) -> Result:
    """Reject a format-valid email that appears on the denylist.

    Only accepts a ValidatedEmail, so format validation always runs first.

    Returns:
        Success(email) unchanged, or Failure holding a one-reason FailureCollection
    """
    if not isinstance(email, ValidatedEmail):
        raise TypeError(
            f"check_not_blacklisted expects a ValidatedEmail, got {type(email).__name__}"
        )
    if email.value in denylist:
        return Failure(error=FailureCollection.of(FailureReason.BLACKLISTED_EMAIL))
    return Success(value=email)
