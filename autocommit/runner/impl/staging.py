"""
Staging stages: add/remove passes and the staged-changes check.

The first pass applies the configured pathspec policy. The second pass
runs after the branch switch and pull, and only ever tolerates pathspec
misses, so a miss is reported at most once per run.
"""

import logging

from autocommit import git
from autocommit.git import GitFailure
from autocommit.lib.types import PathspecPolicy, StagingOperation
from autocommit.runner.context import RunContext
from autocommit.runner.errors import DeferredError
from autocommit.runner.stages import PathspecError, StageError, StageStop

logger = logging.getLogger(__name__)

_GIT_COMMANDS = {
    "add": git.add,
    "rm": git.remove,
}

_LABELS = {
    "add": "Add",
    "rm": "Remove",
}


def run_staging(
    ctx: RunContext,
    operation: StagingOperation,
    policy: PathspecPolicy,
    stage: str,
) -> None:
    """
    Run each argument group of a staging operation, in order.

    Pathspec misses are handled per policy. Any other git failure raises
    StageError whatever the policy.
    """
    run = _GIT_COMMANDS[operation.command]

    for args in operation.groups:
        result = run(ctx.worktree, args)
        if result.success:
            continue

        command_line = " ".join(["git", operation.command] + args)
        if result.failure != GitFailure.PATHSPEC_NO_MATCH:
            raise StageError(stage, f"{command_line} failed: {result.message}")

        if policy == PathspecPolicy.IGNORE:
            logger.debug(f"Ignoring pathspec miss: {command_line}")
            continue

        message = f"{_LABELS[operation.command]} command did not match any file: {command_line}"
        if policy == PathspecPolicy.EXIT_IMMEDIATELY:
            raise PathspecError(stage, message)

        logger.warning(message)
        ctx.errors.record(DeferredError(command_line, message))


def _stage_all(ctx: RunContext, policy: PathspecPolicy, stage: str) -> None:
    config = ctx.config
    if config.add:
        logger.info("> Adding files...")
        run_staging(ctx, config.add, policy, stage)
    else:
        logger.info("> No files to add.")

    if config.remove:
        logger.info("> Removing files...")
        run_staging(ctx, config.remove, policy, stage)
    else:
        logger.info("> No files to remove.")


def stage_files(ctx: RunContext) -> None:
    """First staging pass, under the configured pathspec policy."""
    logger.info("> Staging files...")
    _stage_all(ctx, ctx.config.pathspec_policy, "stage_files")


def check_changes(ctx: RunContext) -> None:
    """Stop the run when nothing is staged."""
    logger.info("> Checking for uncommitted changes in the git working tree...")
    result = git.get_staged_files(ctx.worktree)
    if not result.success:
        raise StageError("check_changes", f"Cannot list staged files: {result.message}")

    ctx.staged_files = git.parse_names(result.stdout)
    if not ctx.staged_files:
        raise StageStop("check_changes", "Working tree clean. Nothing to commit.")
    logger.info(f"> Found {len(ctx.staged_files)} changed files.")


def restage_files(ctx: RunContext) -> None:
    """Second staging pass after switching branch and pulling."""
    logger.info("> Re-staging files...")
    _stage_all(ctx, PathspecPolicy.IGNORE, "restage_files")
