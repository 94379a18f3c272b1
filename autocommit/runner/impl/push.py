"""
Push stage, including recovery from a conflicting remote tag.
"""

import logging

from autocommit import git
from autocommit.lib.constants import DEFAULT_REMOTE
from autocommit.lib.types import CustomPush, DefaultUpstream, NoPush
from autocommit.runner.context import RunContext
from autocommit.runner.errors import DeferredError
from autocommit.runner.stages import StageError

logger = logging.getLogger(__name__)


def push_tags(ctx: RunContext) -> None:
    """
    Push tags to origin.

    If the push is rejected (usually because the remote already has a
    different tag with the same name), delete that tag on the remote and
    push once more. Only the tag named in the tag arguments is deleted.
    """
    logger.info("> Pushing tags to repo...")
    result = git.push_tags(ctx.worktree, DEFAULT_REMOTE)
    if result.success:
        ctx.result.tags_pushed = True
        return

    logger.debug(f"git push {DEFAULT_REMOTE} --tags: {result.message}")
    logger.info("> Tag push failed: deleting remote tag and re-pushing...")

    tag_name = git.tag_name_from_args(ctx.config.tag_args)
    if tag_name is None:
        ctx.errors.record(DeferredError(
            "git push --tags",
            f"Tag push failed and no tag name found to recover with: {result.message}",
        ))
        return

    deleted = git.delete_remote_ref(ctx.worktree, DEFAULT_REMOTE, tag_name)
    if not deleted.success:
        ctx.errors.record(DeferredError(
            f"git push --delete {DEFAULT_REMOTE} {tag_name}",
            f"Cannot delete remote tag '{tag_name}': {deleted.message}",
        ))
        return

    retried = git.push_tags(ctx.worktree, DEFAULT_REMOTE)
    if not retried.success:
        ctx.errors.record(DeferredError(
            "git push --tags",
            f"Tag push failed after deleting remote tag '{tag_name}': {retried.message}",
        ))
        return

    ctx.result.tags_pushed = True


def push_changes(ctx: RunContext) -> None:
    directive = ctx.config.push
    if isinstance(directive, NoPush):
        logger.info("> Not pushing anything.")
        return

    logger.info("> Pushing commit to repo...")
    if isinstance(directive, DefaultUpstream):
        logger.debug(f"Running: git push {DEFAULT_REMOTE} {ctx.config.branch} --set-upstream")
        result = git.push_set_upstream(ctx.worktree, DEFAULT_REMOTE, ctx.config.branch)
    elif isinstance(directive, CustomPush):
        logger.debug(f"Running: git push {' '.join(directive.args)}")
        result = git.push(ctx.worktree, list(directive.args))
    else:
        raise StageError("push", f"Unknown push directive: {directive!r}")

    if not result.success:
        raise StageError("push", f"git push failed: {result.message}")
    ctx.result.pushed = True

    if ctx.result.tagged:
        push_tags(ctx)
    else:
        logger.info("> No tags to push.")
