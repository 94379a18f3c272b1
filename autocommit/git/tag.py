"""Git tag operations."""

from pathlib import Path

from autocommit.git.runner import run_git, GitResult


def create_tag(worktree: Path, args: list[str]) -> GitResult:
    """Run `git tag` with the given arguments."""
    return run_git(["tag"] + args, worktree)


def tag_name_from_args(args: list[str]) -> str | None:
    """
    Return the tag name from `git tag` arguments.

    This is the first token that is not an option. Values of options
    (e.g. the text after -m) are not skipped, so put the tag name first.
    """
    for token in args:
        if not token.startswith("-"):
            return token
    return None
