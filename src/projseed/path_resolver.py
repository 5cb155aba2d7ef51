"""Map archive member names onto paths under a destination root."""

import os
from pathlib import Path, PurePosixPath, PureWindowsPath

from projseed.errors import ScaffoldIOError, UnsafeMemberPath


def check_member_name(member_name: str):
    """Reject member names that could escape the destination root.

    Raises:
        UnsafeMemberPath: For absolute names, drive-qualified names, or
            names containing a ``..`` segment
    """
    posix = PurePosixPath(member_name)
    windows = PureWindowsPath(member_name)
    if posix.is_absolute() or windows.drive or windows.root:
        raise UnsafeMemberPath(member_name)
    if ".." in posix.parts or ".." in windows.parts:
        raise UnsafeMemberPath(member_name)


def resolve(destination_root, member_name: str) -> Path:
    """Join *member_name* onto *destination_root*. No filesystem access."""
    return Path(destination_root).joinpath(*PurePosixPath(member_name).parts)


def ensure_dir(path: Path):
    """Create *path* and any missing ancestors; existing directories are fine.

    Raises:
        ScaffoldIOError: On any failure other than the directory existing
    """
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise ScaffoldIOError(path, e) from e


def ensure_parent_dirs(target_path: Path):
    """Create all missing ancestor directories of *target_path*."""
    parent = target_path.parent
    if not parent.is_dir():
        ensure_dir(parent)


def base_name(path) -> str:
    """Return the last component of *path*."""
    return Path(path).name
