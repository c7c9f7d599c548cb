"""Selector model: fragment kinds and the Fragment dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Kind(Enum):
    """Category of a compound-selector fragment."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"


# How each kind is written out in the rendered selector.
_TEMPLATES: dict[Kind, str] = {
    Kind.ELEMENT: "{}",
    Kind.ID: "#{}",
    Kind.CLASS: ".{}",
    Kind.ATTRIBUTE: "[{}]",
    Kind.PSEUDO_CLASS: ":{}",
    Kind.PSEUDO_ELEMENT: "::{}",
}


@dataclass(frozen=True)
class Fragment:
    """A single piece of a compound selector.

    The value is kept raw; the kind's prefix (or brackets, for attributes)
    is only added by :attr:`text`.
    """

    kind: Kind
    value: str

    @property
    def text(self) -> str:
        return _TEMPLATES[self.kind].format(self.value)

    def __str__(self) -> str:
        return self.text
