"""Git repository configuration."""

from pathlib import Path

from autocommit.git.runner import run_git, GitResult


def set_config(worktree: Path, key: str, value: str) -> GitResult:
    """Set a repository-local config value."""
    return run_git(["config", key, value], worktree)


def list_config(worktree: Path) -> dict[str, str]:
    """Return the effective config as a dict. Empty on failure."""
    result = run_git(["config", "--list"], worktree)
    if not result.success:
        return {}
    values = {}
    for line in result.stdout.splitlines():
        key, sep, value = line.partition("=")
        if sep:
            values[key] = value
    return values
