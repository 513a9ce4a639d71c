"""Collection operations over Results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias, TypeGuard, TypeVar, overload

from .result import Failure, Result, Success

K = TypeVar("K")
T = TypeVar("T")

# Mapping from field name to the Result for that field.
ResultRecord: TypeAlias = Mapping[str, Result[Any]]


@overload
def all_success(results: Mapping[K, Result[T]]) -> TypeGuard[Mapping[K, Success[T]]]: ...

@overload
def all_success(results: Iterable[Result[T]]) -> TypeGuard[Iterable[Success[T]]]: ...


def all_success(results: Mapping[Any, Result[Any]] | Iterable[Result[Any]]) -> bool:
    """True iff every result is a Success. Vacuously true for no results.

    A mapping is checked by its values, as in ``combine_results``.
    """
    values = results.values() if isinstance(results, Mapping) else results
    return all(isinstance(r, Success) for r in values)


@overload
def combine_results(results: Mapping[K, Result[T]]) -> Result[dict[K, T]]: ...

@overload
def combine_results(results: Iterable[Result[T]]) -> Result[list[T]]: ...


def combine_results(results: Mapping[Any, Result[Any]] | Iterable[Result[Any]]) -> Result[Any]:
    """Combine many Results into one. Fail-fast on the first Failure.

    A sequence becomes a Success of the list of outputs; a mapping becomes a
    Success of a dict with the same keys, in iteration order. The first Failure
    is returned verbatim, with all of its fields, not re-wrapped.

    Example:
        >>> combine_results([create_success(1), create_success(2)])
        Success(output=[1, 2])
        >>> combine_results({"a": create_success(1)})
        Success(output={'a': 1})
    """
    if isinstance(results, Mapping):
        record: dict[Any, Any] = {}
        for key, r in results.items():
            if isinstance(r, Failure):
                return r
            record[key] = r.output
        return Success(record)

    values: list[Any] = []
    for r in results:
        if isinstance(r, Failure):
            return r
        values.append(r.output)
    return Success(values)


# Alternate names for explicit array/object call sites.
combine_array_of_results = combine_results
combine_object_of_results = combine_results
