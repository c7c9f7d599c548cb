"""Chainable CSS compound-selector builder."""

from __future__ import annotations

import logging

from cssbuilder.config import DEFAULT_RULES, SelectorRules
from cssbuilder.errors import DuplicateSingleton, OrderViolation
from cssbuilder.model import Fragment, Kind

logger = logging.getLogger(__name__)


class Selector:
    """Accumulates selector fragments and renders them as one string.

    Fragments are rendered in the order they were appended.  Each append
    is checked against the previous fragment's kind and against the
    singleton rules before anything is stored, so a rejected call leaves
    the builder exactly as it was.

    Example::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus").render()
        # 'a[href$=".png"]:focus'
    """

    def __init__(self, rules: SelectorRules = DEFAULT_RULES) -> None:
        self._rules = rules
        self._fragments: list[Fragment] = []
        self._last_kind: Kind | None = None
        self._seen: set[Kind] = set()

    # --- fragment appenders ---------------------------------------------------

    def element(self, value: str) -> Selector:
        return self._append(Kind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._append(Kind.ID, value)

    def class_(self, value: str) -> Selector:
        return self._append(Kind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self._append(Kind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self._append(Kind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._append(Kind.PSEUDO_ELEMENT, value)

    def add(self, kind: Kind, value: str) -> Selector:
        """Append a fragment of an arbitrary *kind*."""
        return self._append(kind, value)

    def _append(self, kind: Kind, value: str) -> Selector:
        position = self._rules.order_of(kind)
        previous = self._last_kind
        if previous is not None and position < self._rules.order_of(previous):
            logger.debug("Rejected %s %r after %s", kind.value, value, previous.value)
            raise OrderViolation(kind, previous)
        if self._rules.is_singleton(kind) and kind in self._seen:
            logger.debug("Rejected repeated %s %r", kind.value, value)
            raise DuplicateSingleton(kind)

        self._fragments.append(Fragment(kind=kind, value=value))
        self._last_kind = kind
        self._seen.add(kind)
        logger.debug("Appended %s %r", kind.value, value)
        return self

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the selector text; fragments are joined with no separator."""
        return "".join(fragment.text for fragment in self._fragments)

    stringify = render

    # --- introspection --------------------------------------------------------

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    @property
    def last_kind(self) -> Kind | None:
        return self._last_kind

    @property
    def rules(self) -> SelectorRules:
        return self._rules

    def __len__(self) -> int:
        return len(self._fragments)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"
