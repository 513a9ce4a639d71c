"""Reshaping between keyed mappings and lists of records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def flatten(records: Mapping[str, Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Turn ``{key: record}`` into a list of records tagged with ``id`` and ``name``.

    Example:
        >>> flatten({"foo": {"bar": 1}})
        [{'bar': 1, 'id': 'foo', 'name': 'foo'}]
    """
    return [{**value, "id": key, "name": key} for key, value in records.items()]


def unflatten(items: Iterable[Mapping[str, Any]] | None) -> dict[str, Mapping[str, Any]]:
    """Key records by ``id``, falling back to ``name`` when ``id`` is missing or None.

    Records whose key is empty are dropped; later records win on duplicate keys.
    """
    keyed: dict[str, Mapping[str, Any]] = {}
    for item in items or ():
        key = item.get("id")
        if key is None:
            key = item.get("name")
        if key:
            keyed[key] = item
    return keyed
