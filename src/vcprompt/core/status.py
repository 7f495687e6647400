"""Collect the VC status of a directory: detect, run, parse."""

from __future__ import annotations

import logging
from pathlib import Path

from vcprompt.core.detector import detect
from vcprompt.core.models import Status, VcsKind
from vcprompt.parsers.git import parse_git
from vcprompt.parsers.hg import parse_hg
from vcprompt.runners.status import VcsCommandError, run_status_command

logger = logging.getLogger(__name__)


def get_status(kind: VcsKind, repo_root: Path) -> Status | None:
    """Get the status of the repository at *repo_root*.

    Args:
        kind: Detected VCS kind
        repo_root: Repository root returned by the detector

    Returns:
        Status, or None for VcsKind.NONE or when the status command fails

    Raises:
        VcsNotFoundError: If the VCS binary cannot be executed
    """
    if kind is VcsKind.NONE:
        return None

    try:
        output = run_status_command(kind, repo_root)
    except VcsCommandError as e:
        logger.debug(f"No status available: {e}")
        return None

    if kind is VcsKind.GIT:
        return parse_git(output, repo_root)
    if kind is VcsKind.HG:
        return parse_hg(output, repo_root)
    raise ValueError(f"Unsupported VCS kind: {kind!r}")


def collect_status(cwd: Path | None = None) -> Status | None:
    """Detect the repository enclosing *cwd* and return its status, if any."""
    kind, repo_root = detect(cwd)
    if repo_root is None:
        return None
    return get_status(kind, repo_root)
