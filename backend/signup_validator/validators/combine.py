"""Applicative combination of independent validation outcomes.

Unlike and_then(), nothing here short-circuits: every outcome is inspected
and every failure is kept, in argument order.

    combine(Success(e), Success(p), build)   -> Success(build(e, p))
    combine(Failure(fe), Success(_), build)  -> Failure(fe)
    combine(Success(_), Failure(fp), build)  -> Failure(fp)
    combine(Failure(fe), Failure(fp), build) -> Failure(fe.concat(fp))
"""

from typing import Any, Callable, Sequence

from signup_validator.validators.results import Failure, Result, Success


def combine_all(results: Sequence[Result], build: Callable[..., Any]) -> Result:
    """Combine N independent outcomes.

    Args:
        results: Outcomes whose failures are FailureCollections, in field order
        build: Called with every success value positionally when all succeed

    Returns:
        Success(build(*values)) or Failure with all failures concatenated
    """
    if not results:
        raise ValueError("combine_all needs at least one result")

    failures = [r.error for r in results if not r.is_success]
    if failures:
        collected = failures[0]
        for error in failures[1:]:
            collected = collected.concat(error)
        return Failure(error=collected)

    return Success(value=build(*(r.value for r in results)))


def combine(left: Result, right: Result, build: Callable[[Any, Any], Any]) -> Result:
    """Combine two independent outcomes; left-hand failures come first."""
    return combine_all([left, right], build)
