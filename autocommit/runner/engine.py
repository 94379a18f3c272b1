"""
The ordered pipeline for one run.

Stages run strictly in PIPELINE order; each git invocation completes
before the next starts. A StageError stops the run immediately, a
StageStop ends it early as a success, and deferred errors are resolved
once after the last stage.
"""

import logging
from dataclasses import replace
from typing import Callable

from autocommit.lib import actions
from autocommit.lib.types import RunResult
from autocommit.runner.context import RunContext
from autocommit.runner.impl.branch import fetch_remote, pull_changes, switch_branch
from autocommit.runner.impl.commit import configure_identity, create_commit
from autocommit.runner.impl.push import push_changes
from autocommit.runner.impl.staging import check_changes, restage_files, stage_files
from autocommit.runner.impl.tag import create_tag
from autocommit.runner.stages import StageResult, run_stage

logger = logging.getLogger(__name__)

PIPELINE: list[tuple[str, Callable[[RunContext], None]]] = [
    ("stage_files", stage_files),
    ("check_changes", check_changes),
    ("configure_identity", configure_identity),
    ("fetch", fetch_remote),
    ("switch_branch", switch_branch),
    ("pull", pull_changes),
    ("restage_files", restage_files),
    ("commit", create_commit),
    ("tag", create_tag),
    ("push", push_changes),
]


def run_once(ctx: RunContext) -> RunResult:
    """
    Run the pipeline against ctx.worktree.

    Returns a copy of ctx.result on success.

    Raises:
        StageError: a stage failed; later stages did not run
        DeferredError: exactly one deferred error was recorded
        MultipleRuntimeErrors: several deferred errors were recorded
    """
    with actions.group("Internal logs"):
        for stage_name, stage_fn in PIPELINE:
            if run_stage(ctx, stage_name, stage_fn) == StageResult.STOPPED:
                break
        else:
            logger.info("> Task completed.")

    ctx.errors.resolve()
    return replace(ctx.result)
