"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("--verbose/--quiet", default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """objtasks - object utilities and a CSS selector builder."""
    config = ObjtasksConfig(log_level="DEBUG" if verbose else "WARNING")
    logging.basicConfig(level=getattr(logging, config.log_level))


# Import and register subcommands
from objtasks.cli.selector import selector  # noqa: E402
from objtasks.cli.tickets import tickets  # noqa: E402
from objtasks.cli.word import word  # noqa: E402

cli.add_command(selector)
cli.add_command(tickets)
cli.add_command(word)
