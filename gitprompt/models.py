"""Data models for gitprompt."""

from dataclasses import dataclass

from gitprompt.render import DEFAULT_STYLE, PromptStyle, render_prompt

DETACHED_HEAD = "(detached)"
DETACHED_LABEL = "DETACHED"
SHORT_OID_LENGTH = 7
UNCHANGED = frozenset(". ")


def _parse_count(value: str) -> int:
    value = value.removeprefix("+")
    return int(value) if value.isascii() and value.isdigit() else 0


@dataclass
class RepoStatus:
    """Branch identity and change counts accumulated from a porcelain v2 report."""

    branch_head: str | None = None
    branch_oid: str | None = None
    ahead: int = 0
    behind: int = 0
    staged: int = 0
    unstaged: int = 0
    untracked: int = 0

    @property
    def is_detached(self) -> bool:
        """Check if HEAD is detached or the branch name is unknown."""
        return self.branch_head is None or self.branch_head == DETACHED_HEAD

    @property
    def branch_label(self) -> str:
        """Branch name, short commit hash or DETACHED, in that order of preference."""
        if not self.is_detached:
            return self.branch_head
        if self.branch_oid:
            return self.branch_oid[:SHORT_OID_LENGTH]
        return DETACHED_LABEL

    def apply_header_line(self, line: str) -> None:
        """Apply a "# branch.*" header line."""
        words = line[2:].split()
        if len(words) < 2:
            return
        kind, values = words[0], words[1:]
        if kind == "branch.oid":
            self.branch_oid = values[0]
        elif kind == "branch.head":
            self.branch_head = values[0]
        elif kind == "branch.ab":
            for token in values:
                if token.startswith("+"):
                    self.ahead = _parse_count(token[1:])
                elif token.startswith("-"):
                    self.behind = _parse_count(token[1:])

    def apply_record_line(self, line: str) -> None:
        """Apply a per-path record line."""
        if line.startswith("? "):
            self.untracked += 1
            return
        if line.startswith("! "):
            return

        # "1 XY ...", "2 XY ..." or "u XY ..."
        parts = line.split()
        xy = parts[1] if len(parts) > 1 else ".."
        index, worktree = (xy + "..")[:2]
        if index not in UNCHANGED:
            self.staged += 1
        if worktree not in UNCHANGED:
            self.unstaged += 1

    def render(self, style: PromptStyle = DEFAULT_STYLE) -> str:
        return render_prompt(self, style)
