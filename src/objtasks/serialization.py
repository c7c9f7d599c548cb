"""JSON round-tripping for plain values and simple objects."""

from __future__ import annotations

import json
from typing import Any, TypeVar

T = TypeVar("T")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    >>> get_json({"width": 10, "height": 20})
    '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def from_json(cls: type[T], json_text: str) -> T:
    """Create an instance of *cls* from a JSON object string.

    The instance is created without calling ``__init__``; each top-level
    key of the JSON object becomes an attribute.
    """
    data = json.loads(json_text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    instance = cls.__new__(cls)
    for key, value in data.items():
        setattr(instance, key, value)
    return instance
