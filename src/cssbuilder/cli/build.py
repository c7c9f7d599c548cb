"""CLI command: cssbuilder build -- render a selector from parts."""

from __future__ import annotations

import sys

import click

from cssbuilder.cli.parts import split_segments
from cssbuilder.combinator import Renderable, combine
from cssbuilder.errors import SelectorError
from cssbuilder.validation import build as build_selector


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from kind=value PARTS and print it.

    Kinds are element, id, class, attr, pseudo-class and pseudo-element.
    A part that is exactly " ", "+", "~" or ">" combines the selectors on
    either side of it.
    """
    segments, combinators = split_segments(parts)

    try:
        selectors = [build_selector(segment) for segment in segments]
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # Nest from the right: a + b ~ c  ->  combine(a, "+", combine(b, "~", c))
    result: Renderable = selectors[-1]
    for selector, combinator in zip(reversed(selectors[:-1]), reversed(combinators)):
        result = combine(selector, combinator, result)

    click.echo(result.render())
