"""Read-only view of an in-memory template archive (ZIP format)."""

import io
import zipfile
import zlib
from typing import Optional

from projseed.errors import ArchiveCorrupt, MemberIndexOutOfRange

# ZipInfo.create_system value for archives written on Unix hosts.
_UNIX_HOST = 3


class Member:
    """One entry (file or directory marker) of an Archive.

    The content stream is single-pass: ``read()`` may be called once.
    """

    def __init__(self, zip_file: zipfile.ZipFile, info: zipfile.ZipInfo):
        self._zip_file = zip_file
        self._info = info
        self._consumed = False

    @property
    def name(self) -> str:
        return self._info.filename

    @property
    def is_directory(self) -> bool:
        return self.name.endswith("/")

    @property
    def unix_permission_bits(self) -> Optional[int]:
        if self._info.create_system != _UNIX_HOST:
            return None
        mode = self._info.external_attr >> 16
        return mode or None

    def read(self) -> bytes:
        """Return the member's full, uncompressed content.

        Raises:
            RuntimeError: If the content has already been read
            ArchiveCorrupt: If the member's data cannot be decompressed
        """
        if self._consumed:
            raise RuntimeError(f"Content of archive member {self.name} was already read")
        self._consumed = True
        try:
            with self._zip_file.open(self._info) as stream:
                return stream.read()
        except (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError) as e:
            raise ArchiveCorrupt(f"{self.name}: {e}") from e

    def __repr__(self):
        return f"Member(name={self.name!r}, unix_permission_bits={self.unix_permission_bits!r})"


class Archive:
    """An ordered, read-only sequence of Members parsed from a byte buffer."""

    def __init__(self, zip_file: zipfile.ZipFile):
        self._zip_file = zip_file
        self._infos = zip_file.infolist()

    @classmethod
    def from_bytes(cls, buffer: bytes) -> "Archive":
        """Parse *buffer* as an archive.

        Raises:
            ArchiveCorrupt: If the buffer is not a valid archive
        """
        try:
            zip_file = zipfile.ZipFile(io.BytesIO(buffer))
        except (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, EOFError) as e:
            raise ArchiveCorrupt(str(e)) from e
        return cls(zip_file)

    def __len__(self) -> int:
        return len(self._infos)

    def member_at(self, index: int) -> Member:
        """Return the member at *index*, in archive order.

        Raises:
            MemberIndexOutOfRange: If index is negative or >= len(self)
        """
        if not 0 <= index < len(self._infos):
            raise MemberIndexOutOfRange(index, len(self._infos))
        return Member(self._zip_file, self._infos[index])

    def member_names(self) -> list[str]:
        return [info.filename for info in self._infos]
