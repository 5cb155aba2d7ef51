"""Propagate archived Unix permission bits onto extracted files."""

import os
import stat
from pathlib import Path
from typing import Optional

from projseed.errors import ScaffoldIOError

_SUPPORTS_UNIX_PERMISSIONS = os.name == "posix"


def supports_unix_permissions() -> bool:
    return _SUPPORTS_UNIX_PERMISSIONS


def apply_unix_permissions(path: Path, mode: Optional[int]):
    """Apply the permission part of *mode* to *path*.

    A no-op when *mode* is None or the platform has no Unix permission model.

    Raises:
        ScaffoldIOError: If chmod fails
    """
    if mode is None or not supports_unix_permissions():
        return
    try:
        os.chmod(path, stat.S_IMODE(mode))
    except OSError as e:
        raise ScaffoldIOError(path, e) from e
