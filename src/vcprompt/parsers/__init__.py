"""VCS status output parsers."""

from vcprompt.parsers.git import parse_git
from vcprompt.parsers.hg import parse_hg

__all__ = ["parse_git", "parse_hg"]
