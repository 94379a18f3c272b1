"""Git diff operations."""

from pathlib import Path

from autocommit.git.runner import run_git, GitResult


def get_staged_files(worktree: Path) -> GitResult:
    """List the files staged in the index (`git diff --cached --name-only`)."""
    return run_git(["diff", "--cached", "--name-only"], worktree)


def parse_names(output: str) -> list[str]:
    """Split `--name-only` output into file names."""
    return [f.strip() for f in output.splitlines() if f.strip()]
