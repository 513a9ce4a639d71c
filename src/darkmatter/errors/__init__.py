"""Result type and error handling for dark-matter.

- Success/Failure/Result: the discriminated union and its constructors/predicates
- format_error/error_properties: normalization of arbitrary raised values
- guard_sync/guard_async: the bridge from exceptions to Failures
- all_success/combine_results: collection operations
- PreconditionViolation/NoConditionalFound: raised on API misuse
"""

from .aggregate import (
    ResultRecord,
    all_success,
    combine_array_of_results,
    combine_object_of_results,
    combine_results,
)
from .errors import DarkMatterError, ErrorKind, NoConditionalFound, PreconditionViolation, classify_failure
from .guard import (
    caught_failure,
    create_error_properties,
    create_error_string,
    error_properties,
    format_error,
    guard_async,
    guard_sync,
    is_structured_error,
    r_try,
    r_try_async,
)
from .result import Failure, Result, Success, create_fail, create_success, is_fail, is_success, unwrap_results
from .types import ErrorProperties, FailureRecord

__all__ = [
    # Result type
    "Result", "Success", "Failure", "create_success", "create_fail", "is_success", "is_fail", "unwrap_results",
    # Normalization & guards
    "format_error", "error_properties", "is_structured_error", "caught_failure", "guard_sync", "guard_async",
    "create_error_string", "create_error_properties", "r_try", "r_try_async",
    # Collection ops
    "ResultRecord", "all_success", "combine_results", "combine_array_of_results", "combine_object_of_results",
    # Exceptions & taxonomy
    "DarkMatterError", "PreconditionViolation", "NoConditionalFound", "ErrorKind", "classify_failure",
    # Payload types
    "ErrorProperties", "FailureRecord",
]
