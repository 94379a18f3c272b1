"""Git staging and commit operations."""

from pathlib import Path

from autocommit.git.runner import run_git, GitResult


def add(worktree: Path, args: list[str]) -> GitResult:
    """Run `git add` with the given arguments."""
    return run_git(["add"] + args, worktree)


def remove(worktree: Path, args: list[str]) -> GitResult:
    """Run `git rm` with the given arguments."""
    return run_git(["rm"] + args, worktree)


def commit(worktree: Path, message: str, extra_args: list[str] | None = None) -> GitResult:
    """Create a commit with the given message and any extra arguments."""
    return run_git(["commit", "-m", message] + (extra_args or []), worktree)
