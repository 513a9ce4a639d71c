"""First-match conditional dispatch.

Conditions are evaluated lazily in order; the first one returning true selects its
action and later conditions are never evaluated.

Branches can be written three ways:

    >>> cond(5, [
    ...     Conditional(lambda n: n > 10, lambda n: "big"),
    ...     (lambda n: n > 0, lambda n: "pos"),
    ...     {"condition": lambda n: True, "action": lambda n: "other"},
    ... ])
    'pos'
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from ..errors.errors import NoConditionalFound
from ..errors.result import Result, create_fail

T = TypeVar("T")
U = TypeVar("U")

NO_CONDITIONAL_FOUND = "No conditional found"


@dataclass(frozen=True, slots=True)
class Conditional(Generic[T, U]):
    """A branch: ``action`` runs on the input when ``condition`` accepts it."""

    condition: Callable[[T], bool]
    action: Callable[[T], U]


Branch: TypeAlias = Conditional[T, U] | tuple[Callable[[T], bool], Callable[[T], U]] | Mapping[str, Callable[..., Any]]


def as_conditional(branch: Branch[Any, Any]) -> Conditional[Any, Any]:
    """Normalize any accepted branch shape into a Conditional."""
    if isinstance(branch, Conditional):
        return branch
    if isinstance(branch, Mapping):
        return Conditional(branch["condition"], branch["action"])
    if isinstance(branch, tuple) and len(branch) == 2:
        return Conditional(*branch)
    raise TypeError(f"Not a conditional branch: {branch!r}")


def _first_match(value: T, conditionals: Iterable[Branch[T, Any]]) -> Conditional[T, Any] | None:
    for branch in conditionals:
        c = as_conditional(branch)
        if c.condition(value):
            return c
    return None


def cond(value: T, conditionals: Iterable[Branch[T, U]]) -> U:
    """Return the first matching action's raw result.

    Raises:
        NoConditionalFound: If no condition matches
    """
    match = _first_match(value, conditionals)
    if match is None:
        raise NoConditionalFound(NO_CONDITIONAL_FOUND)
    return match.action(value)


def rcond(value: T, conditionals: Iterable[Branch[T, Result[U]]]) -> Result[U]:
    """Result form of ``cond``: no match is a Failure, never an exception."""
    match = _first_match(value, conditionals)
    if match is None:
        return create_fail(NO_CONDITIONAL_FOUND)
    return match.action(value)
