"""Parser for ``hg status`` output."""

from __future__ import annotations

import logging
from pathlib import Path

from vcprompt.core.models import Status, VcsKind

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = "default"

# Plain hg status has no index, so every modification counts as staged
STAGED_CODES = frozenset({"M", "A", "R", "!"})
UNTRACKED_CODE = "?"


def parse_hg(output: str, repo_root: Path) -> Status:
    """Parse hg status output and read branch and bookmark from *repo_root*."""
    status = parse_status(output)
    return status.model_copy(update={"branch": get_branch(repo_root) + get_bookmark(repo_root)})


def parse_status(output: str) -> Status:
    """Parse ``hg status`` lines (``<code> <path>``) into a Status.

    Clean (``C``), ignored (``I``) and unknown codes are skipped.
    """
    staged = untracked = 0

    for line in output.splitlines():
        parts = line.split()
        if not parts:
            continue
        if parts[0] in STAGED_CODES:
            staged += 1
        elif parts[0] == UNTRACKED_CODE:
            untracked += 1

    return Status(name=VcsKind.HG.value, symbol=VcsKind.HG.symbol, staged=staged, untracked=untracked)


def get_branch(repo_root: Path) -> str:
    """Return the current branch, or "default" if it is not recorded."""
    return _read_metadata(repo_root / ".hg" / "branch") or DEFAULT_BRANCH


def get_bookmark(repo_root: Path) -> str:
    """Return the active bookmark prefixed with "*", or an empty string."""
    bookmark = _read_metadata(repo_root / ".hg" / "bookmarks.current")
    return f"*{bookmark}" if bookmark else ""


def _read_metadata(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace").strip()
    except OSError:
        return ""
