"""Bridge between raised exceptions and the Result channel.

``format_error`` and ``error_properties`` normalize any value into failure text and
a structured payload. ``guard_sync`` / ``guard_async`` run a callable and turn a
raised exception into a Failure; every other combinator assumes its inputs are
already Results or plain values.
"""

from __future__ import annotations

import inspect
import traceback
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

from ..foundation.config import settings_or_default
from ..foundation.logging import failure_logging_enabled, get_logger
from .result import Failure, Result, Success
from .types import ErrorProperties

P = ParamSpec("P")
T = TypeVar("T")

logger = get_logger("guard")


# ═══════════════════════════════════════════════════════════════════════════════
# Structured Error Convention
# ═══════════════════════════════════════════════════════════════════════════════


def is_structured_error(value: object) -> bool:
    """Capability check: exceptions, or any object exposing a string ``message``."""
    return isinstance(value, BaseException) or isinstance(getattr(value, "message", None), str)


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _message_of(value: Any) -> str:
    return _safe_str(value) if isinstance(value, BaseException) else value.message


def _stack_of(value: Any) -> str | None:
    if not isinstance(value, BaseException):
        stack = getattr(value, "stack", None)
        return stack if isinstance(stack, str) else None
    if value.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(value, limit=settings_or_default().errors.stack_limit))


def _name_of(value: Any) -> str:
    if not isinstance(value, BaseException):
        name = getattr(value, "name", None)
        if isinstance(name, str):
            return name
    return type(value).__name__


def _cause_of(value: Any) -> Any:
    return value.__cause__ if isinstance(value, BaseException) else getattr(value, "cause", None)


# ═══════════════════════════════════════════════════════════════════════════════
# Normalization
# ═══════════════════════════════════════════════════════════════════════════════


def format_error(value: object, prefix: str = "") -> str:
    """Render any value as failure text, prefixed by ``prefix``.

    Structured errors render as their traceback when one is available (and
    ``DARKMATTER_ERROR_INCLUDE_STACK`` is on), else their message. Anything else
    goes through ``str()``, so a plain dict renders as ``{'a': 1}``.

    Example:
        >>> format_error(ValueError("bad input"), "parse: ")
        'parse: bad input'
        >>> format_error(404)
        '404'
    """
    if not is_structured_error(value):
        return f"{prefix}{_safe_str(value)}"
    stack = _stack_of(value) if settings_or_default().errors.include_stack else None
    return f"{prefix}{stack or _message_of(value)}"


def error_properties(value: object, context: str = "") -> ErrorProperties:
    """Normalize ``value`` into the structured failure payload.

    ``error`` is ``format_error(value, context)``, falling back to the class name
    when that renders empty. ``message``, ``stack`` and ``name`` are filled in for
    structured errors only; ``cause`` is passed through untouched.
    """
    structured = is_structured_error(value)
    return ErrorProperties(
        error=format_error(value, context) or type(value).__name__,
        context=context,
        message=_message_of(value) if structured else None,
        stack=_stack_of(value) if structured else None,
        cause=_cause_of(value) if structured else None,
        name=_name_of(value) if structured else None,
    )


def caught_failure(exc: Exception) -> Failure:
    """Failure for an exception caught at a pipe boundary.

    ``error`` is the exception message (class name if empty); the diagnostic
    fields come from ``error_properties``.
    """
    props = error_properties(exc)
    return Failure(**{**props, "error": props["message"] or props["name"] or props["error"]})


def log_caught(where: str, exc: Exception) -> None:
    if failure_logging_enabled():
        logger.debug("%s caught %s: %s", where, type(exc).__name__, _safe_str(exc))


def _describe(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


# ═══════════════════════════════════════════════════════════════════════════════
# Guards
# ═══════════════════════════════════════════════════════════════════════════════


def guard_sync(fn: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T]:
    """Call ``fn``; return its value as a Success, or any raised exception as a Failure.

    Example:
        >>> guard_sync(int, "42")
        Success(output=42)
        >>> guard_sync(int, "x").name
        'ValueError'
    """
    try:
        return Success(fn(*args, **kwargs))
    except Exception as e:
        log_caught(f"guard_sync({_describe(fn)})", e)
        return Failure(**error_properties(e))


async def guard_async(
    fn: Callable[P, Awaitable[T]] | Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T]:
    """Async version - awaits ``fn``'s result before classifying it.

    Plain return values are accepted too. Cancellation (``asyncio.CancelledError``)
    is not an ``Exception`` and propagates to the caller.
    """
    try:
        value = fn(*args, **kwargs)
        if inspect.isawaitable(value):
            value = await value
        return Success(value)  # type: ignore[arg-type]
    except Exception as e:
        log_caught(f"guard_async({_describe(fn)})", e)
        return Failure(**error_properties(e))


# Alternate names.
create_error_string = format_error
create_error_properties = error_properties
r_try = guard_sync
r_try_async = guard_async
