"""
Commit stages: committer identity and the commit itself.
"""

import json
import logging

from autocommit import git
from autocommit.git import GitFailure
from autocommit.runner.context import RunContext
from autocommit.runner.stages import StageError

logger = logging.getLogger(__name__)


def configure_identity(ctx: RunContext) -> None:
    """Write author and committer identity into the repository config."""
    author = ctx.config.author
    committer = ctx.config.committer
    settings = [
        ("user.email", author.email),
        ("user.name", author.name),
        ("author.email", author.email),
        ("author.name", author.name),
        ("committer.email", committer.email),
        ("committer.name", committer.name),
    ]
    for key, value in settings:
        result = git.set_config(ctx.worktree, key, value)
        if not result.success:
            raise StageError("configure_identity", f"git config {key} failed: {result.message}")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("> Current git config\n" + json.dumps(git.list_config(ctx.worktree), indent=2))


def create_commit(ctx: RunContext) -> None:
    """
    Commit the staged changes.

    "Nothing to commit" is not an error: committed simply stays false.
    """
    logger.info("> Creating commit...")
    config = ctx.config
    result = git.commit(ctx.worktree, config.message, config.commit_args)

    if result.failure == GitFailure.NOTHING_TO_COMMIT:
        logger.info("> Nothing to commit.")
        return
    if not result.success:
        raise StageError("commit", f"git commit failed: {result.message}")

    ctx.result.committed = True
    ctx.result.commit_sha = git.get_commit_sha(ctx.worktree)
    if ctx.result.commit_sha is None:
        logger.warning("Commit created but its SHA could not be read")
    logger.debug(result.stdout.strip())
