"""Render a Status as a (colored) prompt string."""

from __future__ import annotations

import re
from enum import Enum

from rich.color import ColorSystem
from rich.style import Style

from vcprompt.config import PromptConfig
from vcprompt.core.models import Status

_ESCAPE_RE = re.compile(r"(\x1b\[[0-9;]*m)")


class Shell(str, Enum):
    """Target of the prompt string."""

    PLAIN = "plain"
    BASH = "bash"
    ZSH = "zsh"


def format_status(status: Status | None, config: PromptConfig, shell: Shell = Shell.PLAIN) -> str:
    """Format *status* according to *config*.

    Layout:
    ``{prefix}{name}{branch}{operation}{behind}{ahead}{separator}``
    ``{staged}{conflicts}{changed}{untracked}{clean}{suffix}``

    Count segments are left out when zero, ``operation`` when there is no
    ongoing operation and ``clean`` unless the status is clean.
    """
    if status is None:
        return ""

    def segment(field: str, value: object = "", **extra: object) -> str:
        template: str = getattr(config, field)
        text = _escape(template.format(value=value, **extra), shell)
        color: str = getattr(config, f"{field}_color")
        if not (config.color and color):
            return text
        return _wrap_escapes(Style.parse(color).render(text, color_system=ColorSystem.STANDARD), shell)

    parts = [
        _escape(config.prefix, shell),
        segment("name", status.name, symbol=status.symbol),
        segment("branch", status.branch),
    ]
    if status.operations:
        parts.append(segment("operation", "|".join(status.operations)))
    for field in ("behind", "ahead"):
        count = getattr(status, field)
        if count:
            parts.append(segment(field, count))
    parts.append(segment("separator"))
    for field in ("staged", "conflicts", "changed", "untracked"):
        count = getattr(status, field)
        if count:
            parts.append(segment(field, count))
    if status.is_clean:
        parts.append(segment("clean"))
    parts.append(_escape(config.suffix, shell))

    return "".join(parts)


def _escape(text: str, shell: Shell) -> str:
    """Escape characters with special meaning in the shell's prompt variable."""
    if shell is Shell.BASH:
        return text.replace("\\", "\\\\")
    if shell is Shell.ZSH:
        return text.replace("%", "%%")
    return text


def _wrap_escapes(text: str, shell: Shell) -> str:
    """Mark ANSI sequences as zero-width so the shell measures the prompt correctly."""
    if shell is Shell.BASH:
        return _ESCAPE_RE.sub(r"\\[\1\\]", text)
    if shell is Shell.ZSH:
        return _ESCAPE_RE.sub(r"%{\1%}", text)
    return text
