"""Run the build tool's check subcommand against a project."""

from pathlib import Path
from typing import Mapping, Optional

from projseed.build_tool import invoke_build_tool
from projseed.errors import ProjectNotFound
from projseed.new_cmd.new_project import MANIFEST_FILE
from projseed.verbosity import Verbosity


def check_project(
    project_dir,
    verbosity: Verbosity = Verbosity.DEFAULT,
    env: Optional[Mapping[str, Optional[str]]] = None,
) -> bytes:
    """Invoke ``<build tool> check`` with *project_dir* as the working directory.

    Returns:
        The build tool's stdout

    Raises:
        ProjectNotFound: If *project_dir* has no manifest
        CommandError, SpawnError: If the build tool fails
    """
    manifest = Path(project_dir) / MANIFEST_FILE
    if not manifest.is_file():
        raise ProjectNotFound(f"No {MANIFEST_FILE} found in {project_dir}")
    return invoke_build_tool("check", [], working_dir=project_dir, verbosity=verbosity, env=env)
