"""Two-variant result type and the adapters that turn absence into a tagged failure."""

from typing import Any, Callable, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from signup_validator.validators.models import FailureCollection, FailureReason

T = TypeVar("T")
E = TypeVar("E")


class Success(BaseModel, Generic[T]):
    """A validation outcome carrying a value."""

    model_config = ConfigDict(frozen=True)

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Success":
        return Success(value=fn(self.value))

    def map_failure(self, fn: Callable[[Any], Any]) -> "Success":
        return self

    def and_then(self, fn: Callable[[Any], "Result"]) -> "Result":
        """Run a dependent step on the value. The step decides the outcome."""
        return fn(self.value)

    def unwrap_or(self, default: Any) -> Any:
        return self.value


class Failure(BaseModel, Generic[E]):
    """A validation outcome carrying the reason(s) it failed."""

    model_config = ConfigDict(frozen=True)

    error: E

    @property
    def is_success(self) -> bool:
        return False

    def map(self, fn: Callable[[Any], Any]) -> "Failure":
        return self

    def map_failure(self, fn: Callable[[Any], Any]) -> "Failure":
        return Failure(error=fn(self.error))

    def and_then(self, fn: Callable[[Any], "Result"]) -> "Failure":
        return self

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Success, Failure]


def to_reason_or(value: Optional[T], reason: FailureReason) -> Result:
    """Tag an absent value with a single failure reason."""
    if value is None:
        return Failure(error=reason)
    return Success(value=value)


def to_reason_list_or(value: Optional[T], reason: FailureReason) -> Result:
    """Tag an absent value with a one-reason FailureCollection, ready to accumulate."""
    if value is None:
        return Failure(error=FailureCollection.of(reason))
    return Success(value=value)
