"""
Stage execution framework for autocommit.

Defines stage results, stage errors and the single-stage runner.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from autocommit.lib.constants import EXIT_RUN_FAILED
from autocommit.runner.context import RunContext

logger = logging.getLogger(__name__)


class StageResult(Enum):
    PASSED = "passed"
    STOPPED = "stopped"


@dataclass
class StageError(Exception):
    """A stage failed. The pipeline stops here."""
    stage: str
    message: str
    exit_code: int = EXIT_RUN_FAILED
    details: Optional[dict] = None

    def __str__(self):
        return f"[{self.stage}] {self.message}"


class PathspecError(StageError):
    """A staging command matched no files and the policy is exitImmediately."""


class BranchNotFoundError(StageError):
    """The target branch does not exist and branch_mode is throw."""


@dataclass
class StageStop(Exception):
    """Nothing left to do; later stages are skipped and the run succeeds."""
    stage: str
    reason: str


# Stage function signature: (ctx: RunContext) -> None
# Raises StageError on failure, StageStop to end the run early


def run_stage(ctx: RunContext, stage_name: str, stage_fn: Callable[[RunContext], None]) -> StageResult:
    """
    Run a single stage with timing and error handling.

    Returns StageResult and updates ctx.stages.
    """
    logger.debug(f"Starting stage: {stage_name}")
    start = time.time()

    try:
        stage_fn(ctx)
        duration = time.time() - start
        ctx.record_stage(stage_name, "passed", duration)
        logger.debug(f"Stage {stage_name} passed ({duration:.2f}s)")
        return StageResult.PASSED

    except StageStop as e:
        duration = time.time() - start
        ctx.record_stage(stage_name, "stopped", duration, e.reason)
        logger.info(f"> {e.reason}")
        return StageResult.STOPPED

    except StageError as e:
        duration = time.time() - start
        ctx.record_stage(stage_name, "failed", duration, e.message)
        logger.debug(f"Stage {stage_name} failed: {e.message}")
        raise

    except Exception as e:
        duration = time.time() - start
        ctx.record_stage(stage_name, "failed", duration, str(e))
        logger.debug(f"Stage {stage_name} error: {e}")
        raise StageError(stage_name, str(e)) from e
