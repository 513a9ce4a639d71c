"""Tests for the Result data model.

Validates:
- Constructors wrap values unchanged
- Predicates are total and mutually exclusive
- Failure records are copied verbatim
- unwrap_results raises on the first Failure
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from darkmatter import (
    ErrorKind,
    Failure,
    PreconditionViolation,
    Result,
    Success,
    classify_failure,
    create_fail,
    create_success,
    is_fail,
    is_success,
    unwrap_results,
)


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Predicates
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", [0, "", None, [1, 2], {"a": 1}, object()])
def test_success_predicates(value: object) -> None:
    """Success is success and never failure, whatever it holds."""
    result = create_success(value)

    assert is_success(result)
    assert not is_fail(result)


def test_success_preserves_identity() -> None:
    """create_success wraps without copying."""
    payload = {"nested": [1, 2, 3]}
    result = create_success(payload)

    assert result.output is payload


def test_fail_from_string() -> None:
    """A plain string produces a Failure with only error set."""
    result = create_fail("boom")

    assert is_fail(result)
    assert not is_success(result)
    assert result.error == "boom"
    assert result.message is None
    assert result.stack is None
    assert result.cause is None
    assert result.name is None
    assert result.context is None


def test_fail_from_record_copies_fields() -> None:
    """Structured records are copied field by field, cause untouched."""
    cause = object()
    result = create_fail({
        "error": "parse failed",
        "message": "bad token",
        "stack": "trace...",
        "cause": cause,
        "name": "ParseError",
    })

    assert result.error == "parse failed"
    assert result.message == "bad token"
    assert result.stack == "trace..."
    assert result.cause is cause
    assert result.name == "ParseError"


def test_fail_from_record_does_not_synthesize() -> None:
    """Absent fields stay absent; unknown keys are ignored."""
    result = create_fail({"error": "e", "name": "X", "unrelated": 1})

    assert result.error == "e"
    assert result.name == "X"
    assert result.message is None
    assert result.stack is None


def test_fail_from_failure_is_identity() -> None:
    failure = create_fail("e")
    assert create_fail(failure) is failure


def test_fail_requires_error_text() -> None:
    """error must be present and non-empty."""
    with pytest.raises(ValidationError):
        create_fail("")
    with pytest.raises(ValidationError):
        create_fail({"message": "no error field"})  # type: ignore[typeddict-item]


def test_fail_rejects_non_string_fields() -> None:
    """Diagnostic text fields are copied as given, so a non-string is rejected."""
    with pytest.raises(ValidationError):
        create_fail({"error": "e", "message": 123})  # type: ignore[typeddict-item]


def test_results_are_immutable() -> None:
    success = create_success(1)
    failure = create_fail("e")

    with pytest.raises(AttributeError):
        success.output = 2  # type: ignore[misc]
    with pytest.raises(ValidationError):
        failure.error = "changed"  # type: ignore[misc]


def test_truthiness() -> None:
    """Success is truthy even for falsy outputs; Failure is falsy."""
    assert create_success(0)
    assert not create_fail("e")


def test_equality() -> None:
    assert create_success(4) == create_success(4)
    assert create_success(4) != create_success(5)
    assert create_fail("e") == create_fail("e")
    assert create_success("e") != create_fail("e")


def test_failure_hash_ignores_cause() -> None:
    """A Failure stays hashable when its cause is not."""
    failure = create_fail({"error": "e", "cause": {"a": 1}})

    assert hash(failure) == hash(create_fail("e"))
    assert len({failure, create_fail({"error": "e", "cause": {"a": 1}})}) == 1


def test_tags() -> None:
    assert create_success(1).success is True
    assert create_fail("e").success is False


def test_pattern_matching() -> None:
    """Both variants destructure with match statements."""
    def describe(result: Result[int]) -> str:
        match result:
            case Success(output=value):
                return f"ok {value}"
            case Failure(error=text):
                return f"failed {text}"
        return "unreachable"

    assert describe(create_success(3)) == "ok 3"
    assert describe(create_fail("nope")) == "failed nope"


def test_failure_str_is_error() -> None:
    assert str(create_fail("displayable")) == "displayable"


def test_failure_from_exception() -> None:
    failure = Failure.from_exception(KeyError("missing"), "lookup: ")

    assert failure.error == "lookup: 'missing'"
    assert failure.name == "KeyError"
    assert failure.context == "lookup: "


def test_failure_model_dump() -> None:
    """The record serializes for structured logs."""
    dumped = create_fail({"error": "e", "name": "X"}).model_dump()

    assert dumped == {"error": "e", "message": None, "stack": None, "cause": None, "name": "X", "context": None}


# ═════════════════════════════════════════════════════════════════════════════
# Classification
# ═════════════════════════════════════════════════════════════════════════════


def test_classify_failure() -> None:
    assert classify_failure(create_fail("business rule")) is ErrorKind.VALUE_FAILURE
    assert classify_failure(Failure.from_exception(ValueError("x"))) is ErrorKind.CAUGHT_FAILURE


# ═════════════════════════════════════════════════════════════════════════════
# unwrap_results
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_results_all_success() -> None:
    assert unwrap_results([create_success(1), create_success("x")]) == [1, "x"]


def test_unwrap_results_empty() -> None:
    assert unwrap_results([]) == []


def test_unwrap_results_raises_on_first_failure() -> None:
    """The first Failure in order is reported, later ones are not reached."""
    first = create_fail("boom")
    results = [create_success(1), first, create_success(3), create_fail("later")]

    with pytest.raises(PreconditionViolation, match="boom") as info:
        unwrap_results(results)

    assert info.value.failure is first
    assert info.value.index == 1
    assert "later" not in str(info.value)


def test_unwrap_results_accepts_generators() -> None:
    assert unwrap_results(create_success(n) for n in range(3)) == [0, 1, 2]
