"""Tests for collection operations over Results."""

from __future__ import annotations

import pytest

from darkmatter import (
    all_success,
    combine_array_of_results,
    combine_object_of_results,
    combine_results,
    create_fail,
    create_success,
    is_fail,
)


# ═════════════════════════════════════════════════════════════════════════════
# all_success
# ═════════════════════════════════════════════════════════════════════════════


def test_all_success_empty_is_true() -> None:
    assert all_success([]) is True


@pytest.mark.parametrize(
    ("results", "expected"),
    [
        ([create_success(1), create_success(None)], True),
        ([create_success(1), create_fail("e")], False),
        ([create_fail("e")], False),
    ],
)
def test_all_success(results, expected: bool) -> None:
    assert all_success(results) is expected


def test_all_success_checks_mapping_values() -> None:
    assert all_success({"a": create_success(1), "b": create_success(2)}) is True
    assert all_success({"a": create_success(1), "b": create_fail("e")}) is False
    assert all_success({}) is True


# ═════════════════════════════════════════════════════════════════════════════
# combine_results (sequences)
# ═════════════════════════════════════════════════════════════════════════════


def test_combine_sequence_of_successes() -> None:
    assert combine_results([create_success(1), create_success(2)]) == create_success([1, 2])


def test_combine_empty_sequence() -> None:
    assert combine_results([]) == create_success([])


def test_combine_returns_first_failure_verbatim() -> None:
    """The first Failure comes back as the same object, every field intact."""
    first = create_fail({"error": "first", "name": "X", "message": "m"})
    results = [create_success(1), first, create_fail("second")]

    combined = combine_results(results)

    assert combined is first
    assert is_fail(combined) and combined.name == "X"


def test_combine_does_not_read_past_failure() -> None:
    consumed: list[int] = []

    def results():
        for n in range(5):
            consumed.append(n)
            yield create_fail("stop") if n == 1 else create_success(n)

    assert combine_results(results()) == create_fail("stop")
    assert consumed == [0, 1]


# ═════════════════════════════════════════════════════════════════════════════
# combine_results (mappings)
# ═════════════════════════════════════════════════════════════════════════════


def test_combine_mapping_of_successes() -> None:
    combined = combine_results({"b": create_success(2), "a": create_success(1)})

    assert combined == create_success({"b": 2, "a": 1})
    assert list(combined.output) == ["b", "a"]


def test_combine_empty_mapping() -> None:
    assert combine_results({}) == create_success({})


def test_combine_mapping_failure() -> None:
    failure = create_fail("bad field")

    assert combine_results({"ok": create_success(1), "bad": failure}) is failure


def test_aliases() -> None:
    assert combine_array_of_results is combine_results
    assert combine_object_of_results is combine_results
