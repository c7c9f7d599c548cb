"""objtasks: small stateless helpers for dicts, records and JSON."""

from __future__ import annotations

from objtasks.grouping import group, sort_cities_array
from objtasks.objects import (
    compare_objects,
    is_empty_object,
    make_immutable,
    make_word,
    merge_objects,
    remove_properties,
    shallow_copy,
)
from objtasks.serialization import from_json, get_json
from objtasks.shapes import Rectangle
from objtasks.tickets import sell_tickets

__all__ = [
    # objects
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "is_empty_object",
    "make_immutable",
    "make_word",
    # tickets
    "sell_tickets",
    # shapes
    "Rectangle",
    # serialization
    "get_json",
    "from_json",
    # grouping
    "sort_cities_array",
    "group",
]
