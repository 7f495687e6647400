"""Shared fixtures for vcprompt tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_vcp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's VCP_* settings out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("VCP_"):
            monkeypatch.delenv(key)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a directory that looks like a git checkout."""
    root = tmp_path / "git-repo"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    return root


@pytest.fixture
def hg_repo(tmp_path: Path) -> Path:
    """Create a directory that looks like a Mercurial checkout."""
    root = tmp_path / "hg-repo"
    (root / ".hg").mkdir(parents=True)
    (root / ".hg" / "00changelog.i").write_bytes(b"\x00\x00\x00\x02 dummy")
    return root
