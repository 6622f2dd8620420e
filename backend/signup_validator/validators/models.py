"""Validation models — failure reasons, the failure collection, and record types.

Every model is frozen: validated values never change after construction.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class FailureReason(str, Enum):
    """Closed set of reasons a field can be rejected. One per rule."""

    INVALID_EMAIL_FORMAT = "InvalidEmailFormat"
    BLACKLISTED_EMAIL = "BlacklistedEmail"
    INVALID_PASSWORD_FORMAT = "InvalidPasswordFormat"


class FailureCollection(BaseModel):
    """Ordered, non-empty sequence of failure reasons.

    Order is evaluation order (email before password), not severity.
    """

    model_config = ConfigDict(frozen=True)

    reasons: tuple[FailureReason, ...] = Field(min_length=1)

    @classmethod
    def of(cls, *reasons: FailureReason) -> "FailureCollection":
        return cls(reasons=reasons)

    def concat(self, other: "FailureCollection") -> "FailureCollection":
        """Return a new collection with this collection's reasons first."""
        return FailureCollection(reasons=self.reasons + other.reasons)

    def __len__(self) -> int:
        return len(self.reasons)


class RawRecord(BaseModel):
    """Untrusted signup input. Arbitrary text in both fields."""

    model_config = ConfigDict(frozen=True)

    email: str
    password: str

    def __repr_args__(self):
        yield "email", self.email
        yield "password", "********"


class ValidatedEmail(BaseModel):
    """Email text known to satisfy the email format predicate.

    Build it with make_email(), never directly.
    """

    model_config = ConfigDict(frozen=True)

    value: str


class ValidatedPassword(BaseModel):
    """Password text known to satisfy the password predicate.

    Build it with make_password(), never directly.
    """

    model_config = ConfigDict(frozen=True)

    value: str

    def __repr_args__(self):
        yield "value", "********"


class ValidatedRecord(BaseModel):
    """A record whose fields both passed validation."""

    model_config = ConfigDict(frozen=True)

    email: ValidatedEmail
    password: ValidatedPassword

    @classmethod
    def build(cls, email: ValidatedEmail, password: ValidatedPassword) -> "ValidatedRecord":
        return cls(email=email, password=password)
