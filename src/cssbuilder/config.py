"""Selector rule configuration: fragment order and singleton kinds."""

from __future__ import annotations

from dataclasses import dataclass, field

from cssbuilder.errors import UnknownKind
from cssbuilder.model import Kind


@dataclass(frozen=True)
class SelectorRules:
    """Ordering and cardinality rules a builder enforces.

    ``order`` lists kinds from first to last; a kind may only follow kinds
    that appear at or before it.  Kinds in ``singletons`` may occur at most
    once per selector.
    """

    order: tuple[Kind, ...] = (
        Kind.ELEMENT,
        Kind.ID,
        Kind.CLASS,
        Kind.ATTRIBUTE,
        Kind.PSEUDO_CLASS,
        Kind.PSEUDO_ELEMENT,
    )
    singletons: frozenset[Kind] = field(
        default_factory=lambda: frozenset({Kind.ELEMENT, Kind.ID, Kind.PSEUDO_ELEMENT})
    )

    def order_of(self, kind: Kind) -> int:
        """Position of *kind* in the required order."""
        try:
            return self.order.index(kind)
        except ValueError:
            raise UnknownKind(kind) from None

    def is_singleton(self, kind: Kind) -> bool:
        return kind in self.singletons


DEFAULT_RULES = SelectorRules()
