"""
Branch stages: fetch, switch (or create) the target branch, pull.
"""

import logging

from autocommit import git
from autocommit.lib.constants import DEFAULT_PULL_ARGS, FETCH_TAGS_ARGS
from autocommit.lib.types import (
    BranchMode,
    BranchOutcome,
    PullArgs,
    PullDirective,
    SkipPull,
)
from autocommit.runner.context import RunContext
from autocommit.runner.stages import BranchNotFoundError, StageError

logger = logging.getLogger(__name__)


def fetch_remote(ctx: RunContext) -> None:
    """Fetch remote refs and tags, overwriting local tags that diverge."""
    result = git.fetch(ctx.worktree, FETCH_TAGS_ARGS)
    if not result.success:
        raise StageError("fetch", f"git fetch failed: {result.message}")


def resolve_branch(ctx: RunContext) -> BranchOutcome:
    """
    Switch to the configured branch, creating it when allowed.

    Any checkout failure is treated as the branch not existing.
    """
    branch = ctx.config.branch
    result = git.checkout_branch(ctx.worktree, branch)
    if result.success:
        return BranchOutcome.EXISTING

    logger.debug(f"git checkout {branch}: {result.message}")
    if ctx.config.branch_mode != BranchMode.CREATE:
        raise BranchNotFoundError("switch_branch", f"'{branch}' branch not found.")

    logger.info(f"> '{branch}' branch not found, trying to create one.")
    created = git.create_branch(ctx.worktree, branch)
    if not created.success:
        raise StageError("switch_branch", f"Cannot create branch '{branch}': {created.message}")
    return BranchOutcome.CREATED


def switch_branch(ctx: RunContext) -> None:
    logger.info("> Switching/creating branch...")
    ctx.branch_outcome = resolve_branch(ctx)


def pull_args_for(directive: PullDirective, outcome: BranchOutcome | None) -> list[str] | None:
    """
    Arguments for `git pull`, or None to skip pulling.

    An explicit directive wins. Otherwise created branches are not pulled
    and existing ones are pulled without rebasing.
    """
    if isinstance(directive, SkipPull):
        return None
    if isinstance(directive, PullArgs):
        return list(directive.args)
    if outcome == BranchOutcome.CREATED:
        return None
    return list(DEFAULT_PULL_ARGS)


def pull_changes(ctx: RunContext) -> None:
    args = pull_args_for(ctx.config.pull, ctx.branch_outcome)
    if args is None:
        logger.info("> Not pulling from repo.")
        return

    logger.info("> Pulling from remote...")
    logger.debug(f"Current git pull arguments: {' '.join(args)}")
    fetched = git.fetch(ctx.worktree)
    if not fetched.success:
        raise StageError("pull", f"git fetch failed: {fetched.message}")
    result = git.pull(ctx.worktree, args)
    if not result.success:
        raise StageError("pull", f"git pull {' '.join(args)} failed: {result.message}")
