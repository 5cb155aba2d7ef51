"""Exception types raised by projseed.

Every error carries enough context (path, member name, command line, exit
code) in its message for the CLI to print a useful diagnostic.
"""

from pathlib import Path
from typing import Optional, Sequence


class ProjseedError(Exception):
    """Base class for all projseed errors."""


# --- Scaffolding ---


class ScaffoldError(ProjseedError):
    """Base class for failures while materializing a template archive."""


class ArchiveCorrupt(ScaffoldError):
    """The buffer is not a well-formed archive."""

    def __init__(self, reason: str):
        super().__init__(f"Template archive is corrupt: {reason}")
        self.reason = reason


class MemberIndexOutOfRange(ScaffoldError, IndexError):
    def __init__(self, index: int, length: int):
        super().__init__(f"Archive member index {index} out of range (archive has {length} members)")
        self.index = index
        self.length = length


class UnsafeMemberPath(ScaffoldError):
    """An archive member name would resolve outside the destination root."""

    def __init__(self, member_name: str):
        super().__init__(f"Refusing to extract unsafe archive member: {member_name}")
        self.member_name = member_name


class FileAlreadyExists(ScaffoldError):
    def __init__(self, path: Path):
        super().__init__(f"File {path} already exists")
        self.path = path


class ScaffoldIOError(ScaffoldError):
    """Any filesystem failure other than a file collision."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Failed to write {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class NonUtf8TextMember(ScaffoldError):
    def __init__(self, member_name: str):
        super().__init__(
            f"Cannot substitute placeholders in {member_name}: content is not valid UTF-8"
        )
        self.member_name = member_name


# --- External build tool ---


class CommandError(ProjseedError):
    """The build tool ran but exited with a non-zero status."""

    def __init__(self, command_line: Sequence[str], exit_code: Optional[int]):
        super().__init__(f"`{' '.join(command_line)}` failed with exit code: {exit_code}")
        self.command_line = list(command_line)
        self.exit_code = exit_code


class SpawnError(ProjseedError):
    """The build tool could not be started at all."""

    def __init__(self, command_line: Sequence[str], cause: OSError):
        super().__init__(f"Error executing `{' '.join(command_line)}`: {cause}")
        self.command_line = list(command_line)
        self.cause = cause


# --- Hex decoding ---


class HexDecodeError(ProjseedError, ValueError):
    """Base class for malformed hex input."""


class OddLength(HexDecodeError):
    def __init__(self, length: int):
        super().__init__(f"Hex string has odd length {length}")
        self.length = length


class InvalidHexDigit(HexDecodeError):
    def __init__(self, char: str, index: int):
        super().__init__(f"Invalid character {char!r} at position {index}")
        self.char = char
        self.index = index


# --- Project commands ---


class InvalidProjectName(ProjseedError):
    pass


class ProjectAlreadyExists(ProjseedError):
    pass


class ProjectNotFound(ProjseedError):
    pass
