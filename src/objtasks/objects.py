"""Plain-dict helpers: copying, merging, comparing and freezing."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any


def shallow_copy(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict holding the same top-level values as *obj*.

    Nested values are shared, not copied.
    """
    return dict(obj)


def merge_objects(objects: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge mappings into one dict, summing the values of repeated keys.

    >>> merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}])
    {'a': 1, 'b': 5, 'c': 5}
    """
    merged: dict[str, Any] = {}
    for obj in objects:
        for key, value in obj.items():
            if key in merged:
                merged[key] = merged[key] + value
            else:
                merged[key] = value
    return merged


def remove_properties(obj: dict[str, Any], keys: str | Iterable[str]) -> dict[str, Any]:
    """Delete *keys* from *obj* in place and return it.

    Keys that are not present are ignored.  A bare string is treated as a
    single key rather than a sequence of characters.
    """
    if isinstance(keys, str):
        keys = [keys]
    for key in keys:
        obj.pop(key, None)
    return obj


def compare_objects(obj1: Any, obj2: Any) -> bool:
    """Return True if both objects serialize to the same canonical JSON."""
    return _canonical(obj1) == _canonical(obj2)


def _canonical(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"))


def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return len(obj) == 0


def make_immutable(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view of a snapshot of *obj*.

    Item assignment and deletion on the result raise ``TypeError``.
    """
    return MappingProxyType(dict(obj))


def make_word(letters: Mapping[str, Iterable[int]]) -> str:
    """Build a word from letters mapped to the positions they occupy.

    >>> make_word({"H": [0], "e": [1], "l": [2, 3, 8], "o": [4, 6], "W": [5], "r": [7], "d": [9]})
    'HelloWorld'
    """
    placed: dict[int, str] = {}
    for letter, positions in letters.items():
        for position in positions:
            placed[position] = letter
    return "".join(placed[position] for position in sorted(placed))
