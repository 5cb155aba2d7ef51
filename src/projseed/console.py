"""Console output helpers for CLI commands."""

import click

from projseed.verbosity import Verbosity

DEFAULT_KEY_COL_WIDTH = 13


def maybe_echo(verbosity: Verbosity, message: str):
    """Echo *message* only when running verbosely."""
    if verbosity.is_verbose():
        click.echo(message)


def name_value_echo(name: str, value: str, width: int = DEFAULT_KEY_COL_WIDTH):
    """Echo a right-aligned, highlighted name followed by its value."""
    label = click.style(f"{name:>{width}}", fg="bright_magenta", bold=True)
    click.echo(f"{label} {click.style(value, fg='bright_white')}")
