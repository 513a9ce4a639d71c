"""Left-to-right composition of plain functions.

``pipe`` is for total functions: an exception raised by a step propagates to the
caller unmodified. ``pipe_async`` awaits each stage before feeding it to the next.

    >>> pipe(3, lambda x: x + 1, lambda x: x * 2)
    8
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from functools import reduce
from typing import Any, TypeVar, overload

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")


async def resolve(value: Any) -> Any:
    """Await ``value`` until it is no longer awaitable."""
    while inspect.isawaitable(value):
        value = await value
    return value


# ═════════════════════════════════════════════════════════════════════════════
# Synchronous
# ═════════════════════════════════════════════════════════════════════════════


@overload
def pipe(initial: T) -> T: ...

@overload
def pipe(initial: T, f1: Callable[[T], A]) -> A: ...

@overload
def pipe(initial: T, f1: Callable[[T], A], f2: Callable[[A], B]) -> B: ...

@overload
def pipe(initial: T, f1: Callable[[T], A], f2: Callable[[A], B], f3: Callable[[B], C]) -> C: ...

@overload
def pipe(
    initial: T, f1: Callable[[T], A], f2: Callable[[A], B], f3: Callable[[B], C], f4: Callable[[C], D],
) -> D: ...

@overload
def pipe(
    initial: T, f1: Callable[[T], A], f2: Callable[[A], B], f3: Callable[[B], C], f4: Callable[[C], D],
    f5: Callable[[D], E],
) -> E: ...

@overload
def pipe(
    initial: T, f1: Callable[[T], A], f2: Callable[[A], B], f3: Callable[[B], C], f4: Callable[[C], D],
    f5: Callable[[D], E], f6: Callable[[E], F],
) -> F: ...

@overload
def pipe(
    initial: T, f1: Callable[[T], A], f2: Callable[[A], B], f3: Callable[[B], C], f4: Callable[[C], D],
    f5: Callable[[D], E], f6: Callable[[E], F], f7: Callable[[F], G],
) -> G: ...

@overload
def pipe(
    initial: T, f1: Callable[[T], A], f2: Callable[[A], B], f3: Callable[[B], C], f4: Callable[[C], D],
    f5: Callable[[D], E], f6: Callable[[E], F], f7: Callable[[F], G], f8: Callable[[G], H],
) -> H: ...

@overload
def pipe(initial: Any, *fns: Callable[[Any], Any]) -> Any: ...


def pipe(initial: Any, *fns: Callable[[Any], Any]) -> Any:
    """Apply ``fns`` to ``initial`` in order. No steps returns ``initial`` unchanged.

    Typed for up to 8 steps; longer chains run but lose per-step types. Use
    ``compose`` to fold a run of steps into one.
    """
    return reduce(lambda acc, fn: fn(acc), fns, initial)


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Fold several steps into a single step for ``pipe``."""
    return lambda value: pipe(value, *fns)


# ═════════════════════════════════════════════════════════════════════════════
# Asynchronous
# ═════════════════════════════════════════════════════════════════════════════


@overload
async def pipe_async(initial: T | Awaitable[T]) -> T: ...

@overload
async def pipe_async(initial: T | Awaitable[T], f1: Callable[[T], A | Awaitable[A]]) -> A: ...

@overload
async def pipe_async(
    initial: T | Awaitable[T], f1: Callable[[T], A | Awaitable[A]], f2: Callable[[A], B | Awaitable[B]],
) -> B: ...

@overload
async def pipe_async(
    initial: T | Awaitable[T], f1: Callable[[T], A | Awaitable[A]], f2: Callable[[A], B | Awaitable[B]],
    f3: Callable[[B], C | Awaitable[C]],
) -> C: ...

@overload
async def pipe_async(
    initial: T | Awaitable[T], f1: Callable[[T], A | Awaitable[A]], f2: Callable[[A], B | Awaitable[B]],
    f3: Callable[[B], C | Awaitable[C]], f4: Callable[[C], D | Awaitable[D]],
) -> D: ...

@overload
async def pipe_async(
    initial: T | Awaitable[T], f1: Callable[[T], A | Awaitable[A]], f2: Callable[[A], B | Awaitable[B]],
    f3: Callable[[B], C | Awaitable[C]], f4: Callable[[C], D | Awaitable[D]], f5: Callable[[D], E | Awaitable[E]],
) -> E: ...

@overload
async def pipe_async(
    initial: T | Awaitable[T], f1: Callable[[T], A | Awaitable[A]], f2: Callable[[A], B | Awaitable[B]],
    f3: Callable[[B], C | Awaitable[C]], f4: Callable[[C], D | Awaitable[D]], f5: Callable[[D], E | Awaitable[E]],
    f6: Callable[[E], F | Awaitable[F]],
) -> F: ...

@overload
async def pipe_async(
    initial: T | Awaitable[T], f1: Callable[[T], A | Awaitable[A]], f2: Callable[[A], B | Awaitable[B]],
    f3: Callable[[B], C | Awaitable[C]], f4: Callable[[C], D | Awaitable[D]], f5: Callable[[D], E | Awaitable[E]],
    f6: Callable[[E], F | Awaitable[F]], f7: Callable[[F], G | Awaitable[G]],
) -> G: ...

@overload
async def pipe_async(
    initial: T | Awaitable[T], f1: Callable[[T], A | Awaitable[A]], f2: Callable[[A], B | Awaitable[B]],
    f3: Callable[[B], C | Awaitable[C]], f4: Callable[[C], D | Awaitable[D]], f5: Callable[[D], E | Awaitable[E]],
    f6: Callable[[E], F | Awaitable[F]], f7: Callable[[F], G | Awaitable[G]], f8: Callable[[G], H | Awaitable[H]],
) -> H: ...

@overload
async def pipe_async(initial: Any, *fns: Callable[[Any], Any]) -> Any: ...


async def pipe_async(initial: Any, *fns: Callable[[Any], Any]) -> Any:
    """Like ``pipe``, but ``initial`` and any step result may be awaitable.

    Each stage is fully resolved before the next one starts; an exception at
    any stage propagates and no later stage runs.

    Example:
        >>> async def double(x: int) -> int:
        ...     return x * 2
        >>> await pipe_async(3, lambda x: x + 1, double, lambda x: x * x)
        64
    """
    acc = await resolve(initial)
    for fn in fns:
        acc = await resolve(fn(acc))
    return acc


def compose_async(*fns: Callable[[Any], Any]) -> Callable[[Any], Awaitable[Any]]:
    """Fold several (sync or async) steps into a single async step for ``pipe_async``."""
    async def composed(value: Any) -> Any:
        return await pipe_async(value, *fns)
    return composed
