"""Sorting and grouping of record lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def sort_cities_array(arr: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Sort *arr* in place by country, then city, and return it."""
    arr.sort(key=lambda item: (item["country"], item["city"]))
    return arr


def group(
    items: Iterable[T],
    key_selector: Callable[[T], K],
    value_selector: Callable[[T], V],
) -> dict[K, list[V]]:
    """Group *items* into a multimap.

    Keys keep the order of their first appearance and each value list
    keeps input order.
    """
    groups: dict[K, list[V]] = {}
    for item in items:
        groups.setdefault(key_selector(item), []).append(value_selector(item))
    return groups
