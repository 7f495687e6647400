"""Repository detection and the normalized status record."""

from vcprompt.core.detector import detect
from vcprompt.core.models import UNKNOWN_BRANCH, Status, VcsKind

__all__ = [
    "UNKNOWN_BRANCH",
    "Status",
    "VcsKind",
    "detect",
]
