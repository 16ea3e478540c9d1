from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitprompt.models import RepoStatus


ANSI_RESET = "\x1b[0m"


@dataclass(frozen=True)
class PromptStyle:
    """24-bit foreground/background colors of the prompt segment."""

    foreground: tuple[int, int, int] = (255, 255, 255)
    background: tuple[int, int, int] = (6, 150, 154)

    @property
    def prefix(self) -> str:
        fg = ";".join(str(c) for c in self.foreground)
        bg = ";".join(str(c) for c in self.background)
        return f"\x1b[38;2;{fg};48;2;{bg}m"


DEFAULT_STYLE = PromptStyle()


def _format_divergence(status: RepoStatus) -> str:
    text = ""
    if status.ahead > 0:
        text += f" ↑{status.ahead}"
    if status.behind > 0:
        text += f" ↓{status.behind}"
    return text


def _format_changes(status: RepoStatus) -> str:
    text = ""
    if status.staged > 0:
        text += f" [!{status.staged}]"
    if status.unstaged > 0:
        text += f" [+{status.unstaged}]"
    if status.untracked > 0:
        text += f" [?{status.untracked}]"
    return text


def render_text(status: RepoStatus) -> str:
    """Uncolored segment text, e.g. " main ↑1 [+2]"."""
    return f" {status.branch_label}{_format_divergence(status)}{_format_changes(status)}"


def render_prompt(status: RepoStatus, style: PromptStyle = DEFAULT_STYLE) -> str:
    return f"{style.prefix} {render_text(status)} {ANSI_RESET}"
