"""Click command for checking a project with the build tool."""

import sys
from pathlib import Path

import click

from projseed.check_cmd.check_opts import CheckOpts
from projseed.check_cmd.check_project import check_project
from projseed.console import maybe_echo, name_value_echo
from projseed.errors import ProjseedError
from projseed.path_resolver import base_name
from projseed.verbosity import Verbosity


@click.command("check")
@click.argument("project_dir", default=".", type=click.Path(file_okay=False, exists=True))
@click.option("--offline", is_flag=True,
              help="Run the build tool without network access")
@click.pass_context
def check_cmd(ctx, **kwargs):
    """Run the build tool's check subcommand in PROJECT_DIR."""
    opts = CheckOpts(**kwargs)
    verbosity = (ctx.obj or {}).get("verbosity", Verbosity.DEFAULT)
    maybe_echo(verbosity, f"Checking {opts.project_dir}")
    try:
        stdout = check_project(opts.project_dir, verbosity, env=opts.env)
    except ProjseedError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    if stdout:
        click.echo(stdout, nl=False)
    if verbosity is not Verbosity.QUIET:
        name_value_echo("Checked", base_name(Path(opts.project_dir).resolve()))
