"""Create a new project from the bundled template."""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from projseed.archive import Archive
from projseed.errors import InvalidProjectName, ProjectAlreadyExists, ScaffoldIOError
from projseed.new_cmd.template_bundle import bundle_template
from projseed.path_resolver import ensure_dir
from projseed.scaffolder import ScaffoldRequest, scaffold

logger = logging.getLogger(__name__)

MANIFEST_FILE = "Cargo.toml"


def validate_project_name(name: str):
    """Raise InvalidProjectName unless *name* is a valid identifier-like name."""
    if not all(c.isalnum() or c == "_" for c in name):
        raise InvalidProjectName(
            "Project names can only contain alphanumeric characters and underscores"
        )
    if not name[:1].isalpha():
        raise InvalidProjectName("Project names must begin with an alphabetic character")


def new_project(name: str, target_dir=None, template: Optional[bytes] = None) -> str:
    """Scaffold project *name* into ``target_dir/name`` (default: the cwd).

    A fresh output directory is built in a temporary sibling and renamed into
    place only once every member was written, so a failure leaves nothing
    behind. An existing output directory is scaffolded into directly; existing
    files in it are never overwritten.

    Args:
        name: Project name, substituted into the template's placeholders
        target_dir: Parent directory of the new project
        template: Archive bytes to use instead of the bundled template

    Returns:
        A message describing the created project
    """
    validate_project_name(name)

    parent = Path(target_dir) if target_dir is not None else Path.cwd()
    out_dir = parent / name
    if (out_dir / MANIFEST_FILE).exists():
        raise ProjectAlreadyExists(f"A Cargo package already exists in {name}")

    archive = Archive.from_bytes(template if template is not None else bundle_template())

    if out_dir.exists():
        scaffold(ScaffoldRequest(archive, out_dir, name))
    else:
        _scaffold_staged(archive, out_dir, name)

    logger.info("Created project %s in %s", name, out_dir)
    return f"Created project {name}"


def _scaffold_staged(archive: Archive, out_dir: Path, name: str):
    ensure_dir(out_dir.parent)
    staging_root = Path(tempfile.mkdtemp(prefix=f".{name}.", dir=out_dir.parent))
    try:
        staged = staging_root / name
        ensure_dir(staged)
        scaffold(ScaffoldRequest(archive, staged, name))
        try:
            os.rename(staged, out_dir)
        except OSError as e:
            raise ScaffoldIOError(out_dir, e) from e
    finally:
        shutil.rmtree(staging_root, ignore_errors=True)
