"""Options dataclass for the check command."""

from dataclasses import dataclass


@dataclass
class CheckOpts:
    """All options for the check command."""

    project_dir: str = "."
    offline: bool = False

    @property
    def env(self) -> dict[str, str | None]:
        """Environment overrides for the build tool."""
        if self.offline:
            return {"CARGO_NET_OFFLINE": "true"}
        return {}
