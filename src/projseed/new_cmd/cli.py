"""Click command for creating a new project."""

import sys

import click

from projseed.errors import ProjseedError
from projseed.new_cmd.new_opts import NewOpts
from projseed.new_cmd.new_project import new_project


@click.command("new")
@click.argument("name")
@click.option("--target-dir", metavar="DIR",
              type=click.Path(file_okay=False),
              help="Directory in which to create the project (default: current directory)")
def new_cmd(**kwargs):
    """Create a new project named NAME from the bundled template."""
    opts = NewOpts(**kwargs)
    try:
        message = new_project(opts.name, opts.target_dir)
    except ProjseedError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    click.echo(message)
