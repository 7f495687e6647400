"""Run a VCS status command and capture its output."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from vcprompt.core.models import VcsKind

logger = logging.getLogger(__name__)

STATUS_COMMANDS: dict[VcsKind, list[str]] = {
    VcsKind.GIT: ["git", "status", "--porcelain=2", "--branch", "--untracked-files"],
    VcsKind.HG: ["hg", "status", "--color=false", "--pager=false"],
}


class VcsError(Exception):
    """Base exception for VCS invocation errors."""


class VcsNotFoundError(VcsError):
    """The VCS binary could not be started (missing, not executable)."""

    def __init__(self, message: str, binary: str) -> None:
        super().__init__(message)
        self.binary = binary


class VcsCommandError(VcsError):
    """The VCS binary ran but exited with a non-zero status."""

    def __init__(self, message: str, returncode: int, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def run_status_command(kind: VcsKind, working_dir: Path) -> str:
    """Run the status command for *kind* in *working_dir*.

    Args:
        kind: VCS to query, must not be VcsKind.NONE
        working_dir: Repository root to run the command in

    Returns:
        The captured standard output

    Raises:
        VcsNotFoundError: If the binary cannot be executed
        VcsCommandError: If the command exits with a non-zero status or
            working_dir no longer exists
    """
    if kind not in STATUS_COMMANDS:
        raise ValueError(f"No status command for {kind.value!r}")

    command = STATUS_COMMANDS[kind]
    logger.debug(f"Running {' '.join(command)} in {working_dir}")

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            errors="replace",
            cwd=working_dir,
            check=False,
        )
    except OSError as e:
        if not working_dir.is_dir():
            # Removed since detection; nothing wrong with the binary
            raise VcsCommandError(
                f"Working directory {working_dir} is not available: {e}",
                returncode=-1,
                stderr=str(e),
            ) from e
        raise VcsNotFoundError(
            f'Failed to execute "{command[0]}" in {working_dir}: {e}', binary=command[0]
        ) from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        logger.debug(f"{command[0]} status exited with {result.returncode}: {stderr}")
        raise VcsCommandError(
            f"{command[0]} status failed with exit code {result.returncode}",
            returncode=result.returncode,
            stderr=stderr,
        )

    return result.stdout
