"""Factory functions that start a new selector from any fragment kind."""

from __future__ import annotations

from types import SimpleNamespace

from cssbuilder.builder import Selector
from cssbuilder.combinator import combine


def element(value: str) -> Selector:
    return Selector().element(value)


def id(value: str) -> Selector:  # noqa: A001
    return Selector().id(value)


def class_(value: str) -> Selector:
    return Selector().class_(value)


def attr(value: str) -> Selector:
    return Selector().attr(value)


def pseudo_class(value: str) -> Selector:
    return Selector().pseudo_class(value)


def pseudo_element(value: str) -> Selector:
    return Selector().pseudo_element(value)


# Single object exposing every factory, for callers that prefer
# ``builder = css_selector_builder; builder.element("div")...``.
css_selector_builder = SimpleNamespace(
    element=element,
    id=id,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    combine=combine,
)
