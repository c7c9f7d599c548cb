"""CLI command: cssbuilder check -- report every problem in a selector."""

from __future__ import annotations

import sys

import click

from cssbuilder.cli.parts import parse_part
from cssbuilder.validation import Severity, validate


@click.command()
@click.argument("parts", nargs=-1, required=True)
def check(parts: tuple[str, ...]) -> None:
    """Validate one compound selector given as kind=value PARTS.

    Prints diagnostics and exits with code 0 if no errors are found, or
    code 1 if there are errors.
    """
    pairs = [parse_part(raw) for raw in parts]
    diagnostics = validate(pairs)

    if not diagnostics:
        click.echo(f"OK: {len(pairs)} part(s), 0 diagnostics")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    if errors:
        sys.exit(1)
    sys.exit(0)
