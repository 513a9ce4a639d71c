"""Result type: a discriminated union of Success and Failure.

A Result is created once by a constructor and never mutated. Success wraps a value
unchanged; Failure carries a structured error record whose ``error`` text is always
present and non-empty.

    >>> r = create_success(42)
    >>> is_success(r) and r.output
    42
    >>> f = create_fail("boom")
    >>> is_fail(f), f.error, f.message
    (True, 'boom', None)

Pattern matching works on both variants:

    >>> match r:
    ...     case Success(output=value):
    ...         print(value)
    ...     case Failure(error=text):
    ...         print(text)
    42
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Generic, Literal, Self, TypeAlias, TypeGuard, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .errors import PreconditionViolation
from .types import FAILURE_FIELDS

if TYPE_CHECKING:
    from .types import ErrorProperties, FailureRecord

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful variant. Holds ``output`` by reference, no copy."""

    success: ClassVar[Literal[True]] = True

    output: T

    def __bool__(self) -> bool:
        return True


class Failure(BaseModel):
    """Failed variant carrying a structured, loggable error record.

    Only ``error`` is guaranteed. ``message``, ``stack``, ``name`` and ``cause`` are
    diagnostic extras filled in when the failure came from an exception; ``cause``
    is stored as-is without validation. ``context`` is the caller-supplied prefix
    that was merged into ``error``, if any.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

    success: ClassVar[Literal[False]] = False
    __match_args__ = ("error",)

    error: Annotated[str, Field(min_length=1)]
    message: str | None = None
    stack: str | None = Field(default=None, repr=False)
    cause: Any = Field(default=None, repr=False)
    name: str | None = None
    context: str | None = None

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.error

    def __hash__(self) -> int:
        # cause is excluded: it may hold an unhashable value
        return hash((self.error, self.message, self.stack, self.name, self.context))

    @classmethod
    def from_exception(cls, exc: BaseException, context: str = "") -> Self:
        """Normalize an exception into a Failure via ``error_properties``."""
        from .guard import error_properties

        return cls(**error_properties(exc, context))


Result: TypeAlias = Success[T] | Failure


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def create_success(value: T) -> Success[T]:
    """Wrap ``value`` in a Success. Never fails, never copies."""
    return Success(value)


def create_fail(error: str | FailureRecord | ErrorProperties | Mapping[str, Any] | Failure) -> Failure:
    """Build a Failure from a plain string or a structured error record.

    A string yields a Failure with only ``error`` set. A mapping has its known
    fields (error, message, stack, cause, name, context) copied verbatim; nothing
    absent is synthesized and unknown keys are ignored. A Failure is returned as is.

    Raises:
        pydantic.ValidationError: If ``error`` is missing or empty, or if
            ``message``, ``stack``, ``name`` or ``context`` is neither a string
            nor None.
    """
    if isinstance(error, str):
        return Failure(error=error)
    if isinstance(error, Failure):
        return error
    return Failure(**{k: error[k] for k in FAILURE_FIELDS if k in error})


# ═════════════════════════════════════════════════════════════════════════════
# Predicates
# ═════════════════════════════════════════════════════════════════════════════


def is_success(result: Result[T]) -> TypeGuard[Success[T]]:
    """True if ``result`` is the Success variant."""
    return isinstance(result, Success)


def is_fail(result: Result[T]) -> TypeGuard[Failure]:
    """True if ``result`` is the Failure variant."""
    return isinstance(result, Failure)


# ═════════════════════════════════════════════════════════════════════════════
# Unwrapping
# ═════════════════════════════════════════════════════════════════════════════


def unwrap_results(results: Iterable[Result[Any]]) -> list[Any]:
    """Extract the outputs of results that are all expected to be Successes.

    Outputs come back in input order, one per result.

    Raises:
        PreconditionViolation: On the first Failure, with its ``error`` text in
            the message
    """
    outputs: list[Any] = []
    for index, r in enumerate(results):
        if not isinstance(r, Success):
            raise PreconditionViolation.from_failure(r, index)
        outputs.append(r.output)
    return outputs
