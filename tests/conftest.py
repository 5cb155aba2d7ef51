"""Shared fixtures: in-memory template archives."""

import io
import stat
import zipfile

import pytest

_UNIX_HOST = 3
_MSDOS_DIRECTORY_ATTR = 0x10


def build_archive(entries, *, create_system=_UNIX_HOST):
    """Build ZIP bytes from (name, content[, mode]) tuples.

    Names ending in "/" become directory entries and their content is ignored.
    A mode of None records no permission bits.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for entry in entries:
            name, content = entry[0], entry[1]
            mode = entry[2] if len(entry) > 2 else None
            info = zipfile.ZipInfo(name)
            info.create_system = create_system
            info.external_attr = 0
            if name.endswith("/"):
                if mode is not None:
                    info.external_attr = ((stat.S_IFDIR | mode) << 16) | _MSDOS_DIRECTORY_ATTR
                archive.writestr(info, b"")
                continue
            if mode is not None:
                info.external_attr = (stat.S_IFREG | mode) << 16
            info.compress_type = zipfile.ZIP_DEFLATED
            archive.writestr(info, content)
    return buffer.getvalue()


@pytest.fixture
def make_archive():
    """Return the build_archive helper."""
    return build_archive
