"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for expected business-rule
outcomes (duplicate document, unknown assignor, ...). Callers pattern-match.

Usage:
    result = await handler.handle(CreateAssignor(...))
    match result:
        case Success(value=assignor):
            return AssignorPresenter.to_http(assignor)
        case Failure(error=error):
            return _error_response(request, error)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying the produced value.

    Attributes:
        value: Entity, projection or identifier produced by the operation.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying the error value.

    Attributes:
        error: Error constant (str) or DomainError describing the failure.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
