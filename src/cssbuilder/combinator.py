"""Combining rendered selectors with combinator tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

DESCENDANT = " "
CHILD = ">"
ADJACENT_SIBLING = "+"
GENERAL_SIBLING = "~"

COMBINATORS = frozenset({DESCENDANT, CHILD, ADJACENT_SIBLING, GENERAL_SIBLING})


class Renderable(Protocol):
    def render(self) -> str: ...


Operand = Union[Renderable, str]


def _render(operand: Operand) -> str:
    if isinstance(operand, str):
        return operand
    return operand.render()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    The text is fixed when the combination is made; later changes to the
    operand builders do not show up here.
    """

    text: str

    def render(self) -> str:
        return self.text

    stringify = render

    def __str__(self) -> str:
        return self.text


def combine(left: Operand, combinator: str, right: Operand) -> CombinedSelector:
    """Join *left* and *right* as ``"<left> <combinator> <right>"``.

    The combinator is inserted verbatim and always padded with one space on
    each side, so the descendant combinator ``" "`` produces three spaces.
    Results can be passed back in as operands to build longer chains.
    """
    return CombinedSelector(f"{_render(left)} {combinator} {_render(right)}")
