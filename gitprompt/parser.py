"""Parser for `git status --porcelain=v2 -b` output."""

from collections.abc import Iterable

from gitprompt.models import RepoStatus

HEADER_MARKER = "# "


def is_header_line(line: str) -> bool:
    """Check if a line carries branch metadata rather than a path record."""
    return line.startswith(HEADER_MARKER)


def split_lines(text: str) -> list[str]:
    """Split on "\\n" only; paths may contain other Unicode line breaks."""
    return [line.removesuffix("\r") for line in text.split("\n")]


def parse_lines(lines: Iterable[str], status: RepoStatus | None = None) -> RepoStatus:
    """Apply each line, in order, to a status accumulator."""
    if status is None:
        status = RepoStatus()
    for line in lines:
        if is_header_line(line):
            status.apply_header_line(line)
        else:
            status.apply_record_line(line)
    return status


def parse_status(text: str) -> RepoStatus:
    """Parse a full porcelain v2 report."""
    return parse_lines(split_lines(text))
