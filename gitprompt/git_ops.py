"""Git subprocess operations."""

import subprocess
from pathlib import Path
from typing import Sequence


class GitError(Exception):
    """Git command failed or git is not installed."""

    def __init__(self, cmd: Sequence[str], stderr: str) -> None:
        self.cmd = cmd
        self.stderr = stderr
        super().__init__(f"git {' '.join(cmd)}: {stderr}")


def run(args: Sequence[str], cwd: Path | None = None) -> str:
    """Run a git command and return its stdout, decoded leniently."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        raise GitError(args, str(exc)) from exc
    if result.returncode != 0:
        raise GitError(args, result.stderr.decode("utf-8", errors="replace").strip())
    return result.stdout.decode("utf-8", errors="replace")


def try_run(args: Sequence[str], cwd: Path | None = None) -> str | None:
    """Run a git command, returning None on failure."""
    try:
        return run(args, cwd=cwd)
    except GitError:
        return None


def status_porcelain(cwd: Path | None = None) -> str | None:
    """Get branch-aware status in porcelain v2 format, or None outside a repository."""
    return try_run(["status", "--porcelain=v2", "-b"], cwd=cwd)
