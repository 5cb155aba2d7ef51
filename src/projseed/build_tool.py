"""Run the external build tool (cargo by default) as a child process."""

import logging
import os
import subprocess
from typing import Iterable, Mapping, Optional

from projseed.errors import CommandError, SpawnError
from projseed.verbosity import Verbosity

logger = logging.getLogger(__name__)

BUILD_TOOL_ENV_VAR = "CARGO"
DEFAULT_BUILD_TOOL = "cargo"

# Subcommands that reject --verbose.
_NO_VERBOSE_FLAG = frozenset({"dylint"})


def build_tool_executable() -> str:
    return os.environ.get(BUILD_TOOL_ENV_VAR) or DEFAULT_BUILD_TOOL


def build_command_line(
    command: str, args: Iterable[str] = (), verbosity: Verbosity = Verbosity.DEFAULT
) -> list[str]:
    """Assemble ``[tool, command, *args]`` plus the flag for *verbosity*."""
    cmd = [build_tool_executable(), command] + list(args)
    if verbosity is Verbosity.QUIET:
        cmd.append("--quiet")
    elif verbosity is Verbosity.VERBOSE and command not in _NO_VERBOSE_FLAG:
        cmd.append("--verbose")
    return cmd


def build_environment(env: Optional[Mapping[str, Optional[str]]] = None) -> dict[str, str]:
    """Return a copy of os.environ with *env* applied.

    A value of None removes the variable instead of setting it.
    """
    child_env = dict(os.environ)
    for key, value in (env or {}).items():
        if value is None:
            child_env.pop(key, None)
        else:
            child_env[key] = value
    return child_env


def invoke_build_tool(
    command: str,
    args: Iterable[str] = (),
    working_dir=None,
    verbosity: Verbosity = Verbosity.DEFAULT,
    env: Optional[Mapping[str, Optional[str]]] = None,
) -> bytes:
    """Invoke the build tool's *command* subcommand with *args*.

    Blocks until the child exits. stdout is captured and returned; stderr is
    inherited so the tool's diagnostics reach the terminal.

    Args:
        command: Build tool subcommand, e.g. "check"
        args: Additional arguments, passed after the subcommand
        working_dir: Working directory for the child, or None for the current one
        verbosity: Adds --quiet or --verbose to the command line
        env: Variables to set (str value) or unset (None) for the child

    Returns:
        The child's stdout bytes

    Raises:
        SpawnError: If the process cannot be started
        CommandError: If the process exits with a non-zero status
    """
    cmd = build_command_line(command, args, verbosity)
    if working_dir is not None:
        logger.debug("Setting build tool working dir to '%s'", working_dir)

    logger.info("Invoking build tool: %s", cmd)
    try:
        result = subprocess.run(
            cmd,
            cwd=working_dir,
            env=build_environment(env),
            stdout=subprocess.PIPE,
        )
    except OSError as e:
        raise SpawnError(cmd, e) from e

    if result.returncode != 0:
        raise CommandError(cmd, result.returncode)
    return result.stdout
