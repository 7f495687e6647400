"""Find the version control system governing a directory."""

from __future__ import annotations

import logging
from pathlib import Path

from vcprompt.core.models import VcsKind

logger = logging.getLogger(__name__)

# Checked in order within each directory, so Git wins over Mercurial when
# both markers are present. A plain ``.git`` file is a gitdir pointer
# (worktrees, submodules).
MARKERS: tuple[tuple[VcsKind, str], ...] = (
    (VcsKind.GIT, ".git/HEAD"),
    (VcsKind.GIT, ".git"),
    (VcsKind.HG, ".hg/00changelog.i"),
)


def detect(cwd: Path | None = None) -> tuple[VcsKind, Path | None]:
    """Detect the innermost repository containing *cwd*.

    Walks from *cwd* (default: the current directory) up to the filesystem
    root and returns the first kind whose marker file exists, together with
    the directory it was found in.

    Args:
        cwd: Directory to start from. Defaults to current directory.

    Returns:
        Tuple of (kind, root directory), or (VcsKind.NONE, None) if no
        repository encloses *cwd*.
    """
    start = (cwd or Path.cwd()).absolute()

    for directory in (start, *start.parents):
        for kind, marker in MARKERS:
            if _is_file(directory / marker):
                logger.debug(f"Detected {kind.value} repository at {directory}")
                return kind, directory

    logger.debug(f"No repository found above {start}")
    return VcsKind.NONE, None


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        # Unreadable directories count as "no marker"
        return False
