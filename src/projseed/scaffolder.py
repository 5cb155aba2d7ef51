"""Materialize a template archive as a project tree on disk.

Members are processed one at a time, in archive order. Files are created in
exclusive mode so an existing file is never overwritten. A failure part-way
leaves the members written so far in place; callers that need all-or-nothing
behavior must scaffold into a fresh directory and move it into place on
success (see ``projseed.new_cmd.new_project``).
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from projseed.archive import Archive, Member
from projseed.errors import FileAlreadyExists, NonUtf8TextMember, ScaffoldIOError
from projseed.path_resolver import check_member_name, ensure_dir, ensure_parent_dirs, resolve
from projseed.permissions import apply_unix_permissions
from projseed.placeholders import SubstitutionMap

logger = logging.getLogger(__name__)


@dataclass
class ScaffoldRequest:
    """What to extract, where to, and the optional project name."""

    archive: Archive
    destination_root: Union[str, Path]
    project_name: Optional[str] = None


def scaffold(request: ScaffoldRequest):
    """Write every member of ``request.archive`` under ``request.destination_root``.

    When ``request.project_name`` is set, every file member is decoded as
    UTF-8 and its ``{{name}}``/``{{camel_name}}`` placeholders are replaced;
    otherwise file contents are copied byte for byte.

    Raises:
        UnsafeMemberPath: If any member name escapes the destination root;
            raised before anything is written
        FileAlreadyExists: If a file member's target already exists
        NonUtf8TextMember: If substitution was requested on non-UTF-8 content
        ScaffoldIOError: On any other filesystem failure
        ArchiveCorrupt: If a member's data cannot be read
    """
    archive = request.archive
    for member_name in archive.member_names():
        check_member_name(member_name)

    substitutions = None
    if request.project_name is not None:
        substitutions = SubstitutionMap.for_name(request.project_name)

    logger.info(
        "Scaffolding %d archive members into %s", len(archive), request.destination_root
    )
    for index in range(len(archive)):
        member = archive.member_at(index)
        target_path = resolve(request.destination_root, member.name)

        if member.is_directory:
            ensure_dir(target_path)
        else:
            ensure_parent_dirs(target_path)
            _write_member(member, target_path, substitutions)

        apply_unix_permissions(target_path, member.unix_permission_bits)


def _write_member(member: Member, target_path: Path, substitutions: Optional[SubstitutionMap]):
    try:
        outfile = open(target_path, "xb")
    except FileExistsError as e:
        raise FileAlreadyExists(target_path) from e
    except OSError as e:
        raise ScaffoldIOError(target_path, e) from e

    with outfile:
        content = _render(member, substitutions)
        try:
            outfile.write(content)
        except OSError as e:
            raise ScaffoldIOError(target_path, e) from e

    logger.debug("Wrote %s (%d bytes)", target_path, len(content))


def _render(member: Member, substitutions: Optional[SubstitutionMap]) -> bytes:
    content = member.read()
    if substitutions is None:
        return content
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise NonUtf8TextMember(member.name) from e
    return substitutions.apply(text).encode("utf-8")
