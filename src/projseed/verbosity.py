"""Verbosity level shared by the CLI and the build-tool invoker."""

import logging
from enum import Enum

import click


class Verbosity(Enum):
    QUIET = "quiet"
    DEFAULT = "default"
    VERBOSE = "verbose"

    @classmethod
    def from_flags(cls, quiet: bool, verbose: bool) -> "Verbosity":
        """Map the --quiet/--verbose flag pair to a Verbosity.

        Raises:
            click.UsageError: If both flags are set
        """
        if quiet and verbose:
            raise click.UsageError("Cannot pass both --quiet and --verbose flags")
        if quiet:
            return cls.QUIET
        if verbose:
            return cls.VERBOSE
        return cls.DEFAULT

    def is_verbose(self) -> bool:
        return self is Verbosity.VERBOSE

    @property
    def log_level(self) -> int:
        return {
            Verbosity.QUIET: logging.ERROR,
            Verbosity.DEFAULT: logging.WARNING,
            Verbosity.VERBOSE: logging.INFO,
        }[self]
