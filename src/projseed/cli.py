"""Top-level Click group for the projseed CLI."""

import logging

import click

from projseed.check_cmd.cli import check_cmd
from projseed.new_cmd.cli import new_cmd
from projseed.verbosity import Verbosity


@click.group()
@click.option("-q", "--quiet", is_flag=True, help="No output printed to stdout")
@click.option("-v", "--verbose", is_flag=True, help="Use verbose output")
@click.pass_context
def main(ctx, quiet, verbose):
    """projseed - create projects from templates and check them."""
    verbosity = Verbosity.from_flags(quiet, verbose)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("projseed").setLevel(verbosity.log_level)
    ctx.ensure_object(dict)
    ctx.obj["verbosity"] = verbosity


main.add_command(new_cmd)
main.add_command(check_cmd)
