"""Result-aware pipes with short-circuiting.

The first step takes no arguments; each later step receives the previous
Success's ``output``. The first Failure is returned as is and no later step runs.
A raised exception anywhere in the chain becomes a Failure instead of escaping:
the pipe itself is the guard boundary, so raw throwing code and Result-returning
code compose freely.

    >>> rpipe(lambda: create_success(1), lambda n: create_success(n + 1))
    Success(output=2)
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias, TypeVar, overload

from ..errors.guard import caught_failure, log_caught
from ..errors.result import Failure, Result, Success
from ..foundation.logging import failure_logging_enabled, get_logger
from .pipe import resolve

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")

logger = get_logger("rpipe")

# Step shapes: a thunk starts the chain, later steps map output -> Result.
Thunk: TypeAlias = Callable[[], Result[T]]
Step: TypeAlias = Callable[[T], Result[U]]
AsyncThunk: TypeAlias = Callable[[], Result[T] | Awaitable[Result[T]]]
AsyncStep: TypeAlias = Callable[[T], Result[U] | Awaitable[Result[U]]]


def _expect_result(value: object, index: int) -> Result[Any]:
    if isinstance(value, (Success, Failure)):
        return value
    raise TypeError(f"step {index} returned {type(value).__name__}, expected a Result")


def _expect_sync_result(value: object, index: int) -> Result[Any]:
    if inspect.isawaitable(value):
        if inspect.iscoroutine(value):
            value.close()
        raise TypeError(f"step {index} returned an awaitable; use rpipe_async for async steps")
    return _expect_result(value, index)


def _short_circuit(where: str, index: int, failure: Failure) -> Failure:
    if failure_logging_enabled():
        logger.debug("%s short-circuited at step %d: %s", where, index, failure.error)
    return failure


# ═════════════════════════════════════════════════════════════════════════════
# Synchronous
# ═════════════════════════════════════════════════════════════════════════════


@overload
def rpipe(f1: Thunk[A]) -> Result[A]: ...

@overload
def rpipe(f1: Thunk[A], f2: Step[A, B]) -> Result[B]: ...

@overload
def rpipe(f1: Thunk[A], f2: Step[A, B], f3: Step[B, C]) -> Result[C]: ...

@overload
def rpipe(f1: Thunk[A], f2: Step[A, B], f3: Step[B, C], f4: Step[C, D]) -> Result[D]: ...

@overload
def rpipe(f1: Thunk[A], f2: Step[A, B], f3: Step[B, C], f4: Step[C, D], f5: Step[D, E]) -> Result[E]: ...

@overload
def rpipe(
    f1: Thunk[A], f2: Step[A, B], f3: Step[B, C], f4: Step[C, D], f5: Step[D, E], f6: Step[E, F],
) -> Result[F]: ...

@overload
def rpipe(
    f1: Thunk[A], f2: Step[A, B], f3: Step[B, C], f4: Step[C, D], f5: Step[D, E], f6: Step[E, F],
    f7: Step[F, G],
) -> Result[G]: ...

@overload
def rpipe(
    f1: Thunk[A], f2: Step[A, B], f3: Step[B, C], f4: Step[C, D], f5: Step[D, E], f6: Step[E, F],
    f7: Step[F, G], f8: Step[G, H],
) -> Result[H]: ...

@overload
def rpipe(f1: Thunk[Any], *fns: Step[Any, Any]) -> Result[Any]: ...


def rpipe(f1: Thunk[Any], *fns: Step[Any, Any]) -> Result[Any]:
    """Run Result-returning steps in order, stopping at the first Failure.

    No step may be async; a step returning an awaitable yields a Failure.
    """
    index = 0
    try:
        acc = _expect_sync_result(f1(), index)
        for index, fn in enumerate(fns, start=1):
            if isinstance(acc, Failure):
                return _short_circuit("rpipe", index - 1, acc)
            acc = _expect_sync_result(fn(acc.output), index)
        return acc
    except Exception as e:
        log_caught(f"rpipe step {index}", e)
        return caught_failure(e)


def rcompose(f1: Step[Any, Any], *fns: Step[Any, Any]) -> Step[Any, Any]:
    """Fold several Result steps into one, for chains longer than ``rpipe`` types."""
    return lambda value: rpipe(lambda: f1(value), *fns)


# ═════════════════════════════════════════════════════════════════════════════
# Asynchronous
# ═════════════════════════════════════════════════════════════════════════════


@overload
async def result_pipe(f1: AsyncThunk[A]) -> Result[A]: ...

@overload
async def result_pipe(f1: AsyncThunk[A], f2: AsyncStep[A, B]) -> Result[B]: ...

@overload
async def result_pipe(f1: AsyncThunk[A], f2: AsyncStep[A, B], f3: AsyncStep[B, C]) -> Result[C]: ...

@overload
async def result_pipe(
    f1: AsyncThunk[A], f2: AsyncStep[A, B], f3: AsyncStep[B, C], f4: AsyncStep[C, D],
) -> Result[D]: ...

@overload
async def result_pipe(
    f1: AsyncThunk[A], f2: AsyncStep[A, B], f3: AsyncStep[B, C], f4: AsyncStep[C, D], f5: AsyncStep[D, E],
) -> Result[E]: ...

@overload
async def result_pipe(
    f1: AsyncThunk[A], f2: AsyncStep[A, B], f3: AsyncStep[B, C], f4: AsyncStep[C, D], f5: AsyncStep[D, E],
    f6: AsyncStep[E, F],
) -> Result[F]: ...

@overload
async def result_pipe(
    f1: AsyncThunk[A], f2: AsyncStep[A, B], f3: AsyncStep[B, C], f4: AsyncStep[C, D], f5: AsyncStep[D, E],
    f6: AsyncStep[E, F], f7: AsyncStep[F, G],
) -> Result[G]: ...

@overload
async def result_pipe(
    f1: AsyncThunk[A], f2: AsyncStep[A, B], f3: AsyncStep[B, C], f4: AsyncStep[C, D], f5: AsyncStep[D, E],
    f6: AsyncStep[E, F], f7: AsyncStep[F, G], f8: AsyncStep[G, H],
) -> Result[H]: ...

@overload
async def result_pipe(f1: AsyncThunk[Any], *fns: AsyncStep[Any, Any]) -> Result[Any]: ...


async def result_pipe(f1: AsyncThunk[Any], *fns: AsyncStep[Any, Any]) -> Result[Any]:
    """Run sync or async Result-returning steps in order, stopping at the first Failure.

    Each step's value is awaited before it is inspected, so step ``i + 1`` never
    starts before step ``i`` has resolved. Cancellation is not caught.

    Example:
        >>> async def fetch(n: int) -> Result[int]:
        ...     return create_success(n * 2)
        >>> await result_pipe(lambda: create_success(1), fetch)
        Success(output=2)
    """
    index = 0
    try:
        acc = _expect_result(await resolve(f1()), index)
        for index, fn in enumerate(fns, start=1):
            if isinstance(acc, Failure):
                return _short_circuit("result_pipe", index - 1, acc)
            acc = _expect_result(await resolve(fn(acc.output)), index)
        return acc
    except Exception as e:
        log_caught(f"result_pipe step {index}", e)
        return caught_failure(e)


rpipe_async = result_pipe


def rcompose_async(f1: AsyncStep[Any, Any], *fns: AsyncStep[Any, Any]) -> Callable[[Any], Awaitable[Result[Any]]]:
    """Fold several sync or async Result steps into one async step."""
    async def composed(value: Any) -> Result[Any]:
        return await result_pipe(lambda: f1(value), *fns)
    return composed
