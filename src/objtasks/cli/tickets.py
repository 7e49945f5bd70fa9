"""CLI command: objtasks tickets -- run the ticket office simulation."""

from __future__ import annotations

import sys

import click

from objtasks.tickets import DENOMINATIONS, sell_tickets


@click.command()
@click.argument("bills", nargs=-1, type=click.Choice([str(d) for d in DENOMINATIONS]))
def tickets(bills: tuple[str, ...]) -> None:
    """Check whether every customer paying with BILLS can get change.

    Prints "yes" and exits 0 if so, otherwise prints "no" and exits 1.
    """
    if sell_tickets(int(b) for b in bills):
        click.echo("yes")
        sys.exit(0)
    click.echo("no")
    sys.exit(1)
