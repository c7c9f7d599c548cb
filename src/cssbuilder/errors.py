"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model import Kind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for all selector building failures."""

    def __init__(self, message: str, *, kind: Kind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class OrderViolation(SelectorError):
    """A fragment was appended after a fragment of a later kind."""

    def __init__(self, kind: Kind, previous: Kind) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind)
        self.previous = previous


class DuplicateSingleton(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, kind: Kind) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind=kind)


class UnknownKind(SelectorError):
    """A fragment kind is missing from the configured rule order."""

    def __init__(self, kind: Kind) -> None:
        super().__init__(f"Kind {kind.value!r} is not part of the rule order", kind=kind)
