"""Core data models for vcprompt."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_BRANCH = "<unknown>"


class VcsKind(str, Enum):
    """Version control systems vcprompt knows how to query."""

    GIT = "git"
    HG = "hg"
    NONE = "none"

    @property
    def symbol(self) -> str:
        """Short display glyph for this kind."""
        return _SYMBOLS[self]


_SYMBOLS = {
    VcsKind.GIT: "±",
    VcsKind.HG: "☿",
    VcsKind.NONE: "",
}


class Status(BaseModel):
    """The current VC status of a repository.

    Built once per invocation by a parser and handed to the formatter.

    Attributes:
        name: VCS kind that produced this record ("git", "hg")
        symbol: Display glyph of that VCS
        branch: Branch (and bookmark) name, "<unknown>" if not determinable
        ahead: Revisions we are ahead of upstream
        behind: Revisions we are behind upstream
        staged: Files with a change recorded in the index
        changed: Files with a change in the working tree
        untracked: Untracked files
        conflicts: Unmerged files
        operations: In-progress operations, e.g. ("REBASE", "MERGING")
    """

    model_config = ConfigDict(frozen=True)

    name: str
    symbol: str
    branch: str = UNKNOWN_BRANCH
    ahead: int = Field(default=0, ge=0)
    behind: int = Field(default=0, ge=0)
    staged: int = Field(default=0, ge=0)
    changed: int = Field(default=0, ge=0)
    untracked: int = Field(default=0, ge=0)
    conflicts: int = Field(default=0, ge=0)
    operations: tuple[str, ...] = ()

    @classmethod
    def new(cls, kind: VcsKind) -> Status:
        """Create an empty status for *kind* with an unknown branch and all counts 0."""
        return cls(name=kind.value, symbol=kind.symbol)

    @property
    def is_clean(self) -> bool:
        """Check if there are no staged, changed, untracked or conflicted files."""
        return not (self.staged or self.changed or self.untracked or self.conflicts)
