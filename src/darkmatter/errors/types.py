"""Type aliases shared by the result, guard and aggregation modules."""

from __future__ import annotations

from typing import Any, NotRequired, TypedDict

# Fields copied verbatim from a structured error record into a Failure.
FAILURE_FIELDS: tuple[str, ...] = ("error", "message", "stack", "cause", "name", "context")


class ErrorProperties(TypedDict):
    """Structured failure payload produced by ``error_properties``.

    ``error`` and ``context`` are always present. The diagnostic extras are
    ``None`` when the normalized value was not a structured error.
    """

    error: str
    context: str
    message: str | None
    stack: str | None
    cause: Any
    name: str | None


class FailureRecord(TypedDict):
    """Input accepted by ``create_fail`` besides a plain string."""

    error: str
    message: NotRequired[str | None]
    stack: NotRequired[str | None]
    cause: NotRequired[Any]
    name: NotRequired[str | None]
    context: NotRequired[str | None]
