"""Parsing ``kind=value`` command-line parts into fragment pairs."""

from __future__ import annotations

import click

from cssbuilder.combinator import COMBINATORS
from cssbuilder.model import Kind

KIND_NAMES: dict[str, Kind] = {
    "element": Kind.ELEMENT,
    "id": Kind.ID,
    "class": Kind.CLASS,
    "attr": Kind.ATTRIBUTE,
    "pseudo-class": Kind.PSEUDO_CLASS,
    "pseudo-element": Kind.PSEUDO_ELEMENT,
}


def parse_part(raw: str) -> tuple[Kind, str]:
    """Turn ``"class=active"`` into ``(Kind.CLASS, "active")``."""
    name, sep, value = raw.partition("=")
    if not sep:
        raise click.BadParameter(
            f"{raw!r} is neither kind=value nor a combinator", param_hint="PART"
        )
    kind = KIND_NAMES.get(name.strip().lower())
    if kind is None:
        raise click.BadParameter(
            f"Unknown kind {name!r}. Use one of: {', '.join(KIND_NAMES)}.",
            param_hint="PART",
        )
    return kind, value


def split_segments(
    raw_parts: tuple[str, ...],
) -> tuple[list[list[tuple[Kind, str]]], list[str]]:
    """Split parts on combinator tokens.

    Returns the compound-selector segments and the combinators between
    them; there is always one more segment than combinator.
    """
    segments: list[list[tuple[Kind, str]]] = [[]]
    combinators: list[str] = []
    for raw in raw_parts:
        if raw in COMBINATORS:
            if not segments[-1]:
                raise click.BadParameter(
                    f"Combinator {raw!r} has no selector on its left", param_hint="PART"
                )
            combinators.append(raw)
            segments.append([])
            continue
        segments[-1].append(parse_part(raw))
    if not segments[-1]:
        raise click.BadParameter("Expected a selector after the last combinator", param_hint="PART")
    return segments, combinators
