"""Git branch operations."""

from pathlib import Path

from autocommit.git.runner import run_git, GitResult


def checkout_branch(worktree: Path, branch: str) -> GitResult:
    """Switch to an existing branch (or one git can create from a remote of the same name)."""
    return run_git(["checkout", branch], worktree)


def create_branch(worktree: Path, branch: str) -> GitResult:
    """Create a new local branch and switch to it."""
    return run_git(["checkout", "-b", branch], worktree)


def get_commit_sha(worktree: Path, ref: str = "HEAD") -> str | None:
    """Get the SHA of a ref."""
    result = run_git(["rev-parse", ref], worktree)
    if result.success:
        return result.stdout.strip()
    return None
