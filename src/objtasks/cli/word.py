"""CLI command: objtasks word -- rebuild a word from a JSON letters mapping."""

from __future__ import annotations

import json
import sys

import click

from objtasks.serialization import from_json
from objtasks.words import make_word


@click.command()
@click.argument("letters")
def word(letters: str) -> None:
    """Print the word described by LETTERS, a JSON object of letter -> positions."""
    try:
        mapping = from_json(dict, letters)
        click.echo(make_word(mapping))
    except (json.JSONDecodeError, TypeError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
