"""Parser for ``git status --porcelain=2 --branch`` output."""

from __future__ import annotations

import logging
from pathlib import Path

from vcprompt.core.models import Status, VcsKind

logger = logging.getLogger(__name__)

# Marker files inside the git dir, in display priority order
OPERATIONS: tuple[tuple[str, str], ...] = (
    ("rebase-merge", "REBASE"),
    ("rebase-apply", "AM/REBASE"),
    ("MERGE_HEAD", "MERGING"),
    ("CHERRY_PICK_HEAD", "CHERRY-PICKING"),
    ("REVERT_HEAD", "REVERTING"),
    ("BISECT_LOG", "BISECTING"),
)

# Width of the "<sub>" submodule state field, e.g. "N..." or "SC.U"
SUBMODULE_STATE_WIDTH = 4


def parse_git(output: str, repo_root: Path) -> Status:
    """Parse git status output and look for ongoing operations in *repo_root*."""
    status = parse_status(output)
    return status.model_copy(update={"operations": get_operations(git_dir(repo_root))})


def parse_status(output: str) -> Status:
    """Parse porcelain v2 output into a Status.

    Line formats (see git-status(1)):
    ```
    # branch.head <branch>
    # branch.ab +<ahead> -<behind>
    1 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <path>
    2 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <X><score> <path><sep><origPath>
    u <XY> <sub> <m1> <m2> <m3> <mW> <h1> <h2> <h3> <path>
    ? <path>
    ! <path>
    ```
    ``X`` is the index side and ``Y`` the working tree side, ``.`` meaning
    unchanged. Unknown lines are ignored.
    """
    fields: dict[str, int | str] = {}
    staged = changed = untracked = conflicts = 0

    for line in output.splitlines():
        parts = line.split(" ")
        kind = parts[0]

        if kind == "#":
            fields.update(_parse_header(parts))
        elif kind in ("1", "2"):
            code = parts[1] if len(parts) > 1 else ""
            # The submodule state is also reported by the XY code ("M" on
            # the working tree side), so it must not be counted again.
            if not code or len(code) == SUBMODULE_STATE_WIDTH:
                continue
            if not code.startswith("."):
                staged += 1
            if not code.endswith("."):
                changed += 1
        elif kind == "u":
            conflicts += 1
        elif kind == "?":
            untracked += 1

    return Status(
        name=VcsKind.GIT.value,
        symbol=VcsKind.GIT.symbol,
        staged=staged,
        changed=changed,
        untracked=untracked,
        conflicts=conflicts,
        **fields,
    )


def _parse_header(parts: list[str]) -> dict[str, int | str]:
    if len(parts) < 3:
        return {}

    if parts[1] == "branch.head":
        return {"branch": parts[2]}

    if parts[1] == "branch.ab" and len(parts) >= 4:
        try:
            return {"ahead": abs(int(parts[2])), "behind": abs(int(parts[3]))}
        except ValueError:
            logger.debug(f"Ignoring malformed header: {' '.join(parts)}")

    return {}


def git_dir(repo_root: Path) -> Path:
    """Return the git dir of *repo_root*, following a ``gitdir:`` pointer file."""
    dot_git = repo_root / ".git"
    try:
        if dot_git.is_file():
            content = dot_git.read_text(encoding="utf-8").strip()
            if content.startswith("gitdir:"):
                return repo_root / content[len("gitdir:") :].strip()
    except OSError as e:
        logger.debug(f"Cannot read {dot_git}: {e}")
    return dot_git


def get_operations(gitdir: Path) -> tuple[str, ...]:
    """Look for files in *gitdir* that indicate an ongoing operation (e.g., a merge)."""
    operations = []
    for fname, operation in OPERATIONS:
        if (gitdir / fname).exists():
            operations.append(operation)
    return tuple(operations)
