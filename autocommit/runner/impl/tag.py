"""
Tag stage.
"""

import logging

from autocommit import git
from autocommit.runner.context import RunContext
from autocommit.runner.errors import DeferredError

logger = logging.getLogger(__name__)


def create_tag(ctx: RunContext) -> None:
    """
    Create the configured tag.

    A failure fails the run at the end but does not stop the push.
    """
    args = ctx.config.tag_args
    if not args:
        logger.info("> No tag info provided.")
        return

    logger.info("> Tagging commit...")
    result = git.create_tag(ctx.worktree, args)
    if not result.success:
        command_line = " ".join(["git", "tag"] + args)
        logger.error(f"{command_line} failed: {result.message}")
        ctx.errors.record(DeferredError(command_line, f"Tag creation failed: {result.message}"))
        return

    ctx.result.tagged = True
