"""CLI command: objtasks selector -- build a selector from kind:value fragments."""

from __future__ import annotations

import sys

import click

from objtasks.selector import FragmentKind, SelectorBuilder, SelectorBuilderError


def _split_fragment(raw: str) -> tuple[FragmentKind, str]:
    label, sep, value = raw.partition(":")
    if not sep:
        raise click.BadParameter(f"expected kind:value, got {raw!r}")
    try:
        return FragmentKind.from_label(label), value
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.command()
@click.argument("fragments", nargs=-1, required=True)
def selector(fragments: tuple[str, ...]) -> None:
    """Build a CSS selector from FRAGMENTS and print it.

    Each fragment is KIND:VALUE where KIND is one of element, id, class,
    attr, pseudo-class or pseudo-element, e.g.

        objtasks selector element:a 'attr:href$=".png"' pseudo-class:focus
    """
    builder = SelectorBuilder()
    try:
        for raw in fragments:
            kind, value = _split_fragment(raw)
            builder.add(kind, value)
    except SelectorBuilderError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())
