"""Git remote operations."""

from pathlib import Path

from autocommit.git.runner import run_git, GitResult

REMOTE_TIMEOUT = 120


def fetch(worktree: Path, args: list[str] | None = None) -> GitResult:
    """Fetch from the default remote, with optional extra arguments."""
    return run_git(["fetch"] + (args or []), worktree, timeout=REMOTE_TIMEOUT)


def pull(worktree: Path, args: list[str]) -> GitResult:
    """Pull with the given arguments."""
    return run_git(["pull"] + args, worktree, timeout=REMOTE_TIMEOUT)


def push(worktree: Path, args: list[str]) -> GitResult:
    """Push using exactly the given arguments."""
    return run_git(["push"] + args, worktree, timeout=REMOTE_TIMEOUT)


def push_set_upstream(worktree: Path, remote: str, branch: str) -> GitResult:
    """Push and set upstream tracking."""
    return run_git(["push", remote, branch, "--set-upstream"], worktree, timeout=REMOTE_TIMEOUT)


def push_tags(worktree: Path, remote: str) -> GitResult:
    """Push all local tags."""
    return run_git(["push", remote, "--tags"], worktree, timeout=REMOTE_TIMEOUT)


def delete_remote_ref(worktree: Path, remote: str, ref: str) -> GitResult:
    """Delete a ref (branch or tag) on the remote."""
    return run_git(["push", "--delete", remote, ref], worktree, timeout=REMOTE_TIMEOUT)
