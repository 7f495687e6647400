"""VCS command runners."""

from vcprompt.runners.status import (
    STATUS_COMMANDS,
    VcsCommandError,
    VcsError,
    VcsNotFoundError,
    run_status_command,
)

__all__ = [
    "STATUS_COMMANDS",
    "VcsCommandError",
    "VcsError",
    "VcsNotFoundError",
    "run_status_command",
]
