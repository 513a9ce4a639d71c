"""Dark matter - type-safe success/failure handling without exceptions.

A Result is either a Success holding ``output`` or a Failure holding a structured
error record. Combinators thread Results through step functions and stop at the
first Failure; guards turn raised exceptions into Failures.

Quick Start:
    >>> from darkmatter import create_success, create_fail, is_success, rpipe
    >>>
    >>> ok = create_success(42)
    >>> if is_success(ok):
    ...     print(ok.output)
    42
    >>> create_fail("Something went wrong").error
    'Something went wrong'

Composition:
    >>> rpipe(
    ...     lambda: create_success(1),
    ...     lambda n: create_success(n + 1),
    ...     lambda n: create_success(n * 2),
    ... )
    Success(output=4)

    >>> from darkmatter import result_pipe
    >>> await result_pipe(lambda: create_success(1), fetch_user, load_profile)

Guards:
    >>> from darkmatter import guard_sync
    >>> guard_sync(int, "nope").name
    'ValueError'

Dispatch:
    >>> from darkmatter import cond, rcond
    >>> cond(5, [(lambda n: n < 0, lambda n: "neg"), (lambda n: n > 0, lambda n: "pos")])
    'pos'
"""

from __future__ import annotations

__version__ = "0.4.0"

# Result type, guards, aggregation
from .errors import (
    DarkMatterError,
    ErrorKind,
    ErrorProperties,
    Failure,
    FailureRecord,
    NoConditionalFound,
    PreconditionViolation,
    Result,
    ResultRecord,
    Success,
    all_success,
    classify_failure,
    combine_array_of_results,
    combine_object_of_results,
    combine_results,
    create_error_properties,
    create_error_string,
    create_fail,
    create_success,
    error_properties,
    format_error,
    guard_async,
    guard_sync,
    is_fail,
    is_structured_error,
    is_success,
    r_try,
    r_try_async,
    unwrap_results,
)

# Settings & logging
from .foundation import DarkMatterSettings, clear_settings_cache, configure_logging, get_settings

# Composition & dispatch
from .fp import (
    Conditional,
    compose,
    compose_async,
    cond,
    pipe,
    pipe_async,
    rcompose,
    rcompose_async,
    rcond,
    result_pipe,
    rpipe,
    rpipe_async,
)

# Reshaping
from .shape import flatten, unflatten

__all__ = [
    "__version__",
    # Result type
    "Result", "Success", "Failure", "ResultRecord",
    "create_success", "create_fail", "is_success", "is_fail", "unwrap_results",
    # Error normalization
    "format_error", "error_properties", "is_structured_error", "guard_sync", "guard_async",
    "create_error_string", "create_error_properties", "r_try", "r_try_async",
    "ErrorProperties", "FailureRecord",
    # Aggregation
    "all_success", "combine_results", "combine_array_of_results", "combine_object_of_results",
    # Composition
    "pipe", "pipe_async", "compose", "compose_async",
    "rpipe", "result_pipe", "rpipe_async", "rcompose", "rcompose_async",
    # Dispatch
    "cond", "rcond", "Conditional",
    # Exceptions
    "DarkMatterError", "PreconditionViolation", "NoConditionalFound", "ErrorKind", "classify_failure",
    # Settings
    "DarkMatterSettings", "get_settings", "clear_settings_cache", "configure_logging",
    # Reshaping
    "flatten", "unflatten",
]
