"""Exceptions raised by dark-matter and the failure taxonomy.

Result-returning combinators never raise for business failures. The classes here
cover the remaining cases: callers misusing an API that assumes all-success input.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from .result import Failure


class ErrorKind(StrEnum):
    """Where a failure came from."""
    VALUE_FAILURE = "value_failure"
    CAUGHT_FAILURE = "caught_failure"
    PRECONDITION_VIOLATION = "precondition_violation"


def classify_failure(failure: Failure) -> ErrorKind:
    """Tag a Failure as caught (built from an exception) or as a plain value failure.

    Failures synthesized from exceptions always carry the exception class name;
    hand-built failures only do so when the caller supplied one.
    """
    return ErrorKind.CAUGHT_FAILURE if failure.name is not None else ErrorKind.VALUE_FAILURE


class DarkMatterError(Exception):
    """Base class for every exception raised by dark-matter."""

    kind: ErrorKind = ErrorKind.PRECONDITION_VIOLATION


class PreconditionViolation(DarkMatterError):
    """Raised when an API that requires all-success input receives a Failure.

    Attributes:
        failure: The offending Failure, when there is one
        index: Position of the failure in the input sequence, when known
    """

    __slots__ = ("failure", "index")

    def __init__(self, message: str, *, failure: Failure | None = None, index: int | None = None) -> None:
        self.failure = failure
        self.index = index
        super().__init__(message)

    @classmethod
    def from_failure(cls, failure: Failure, index: int | None = None) -> Self:
        """Build from a Failure found where a Success was required."""
        where = f" at index {index}" if index is not None else ""
        return cls(f"Expected only successful results, found failure{where}: {failure.error}", failure=failure, index=index)


class NoConditionalFound(PreconditionViolation):
    """Raised by ``cond`` when no branch condition matches its input."""

    def __init__(self, message: str = "No conditional found") -> None:
        super().__init__(message)
