"""Options dataclass for the new command."""

from dataclasses import dataclass


@dataclass
class NewOpts:
    """All options for the new command."""

    name: str
    target_dir: str | None = None
