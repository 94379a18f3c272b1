"""
Run context for autocommit.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from autocommit.lib.config import RunConfig
from autocommit.lib.types import BranchOutcome, RunResult
from autocommit.runner.errors import ErrorAggregator


@dataclass
class RunContext:
    """Everything a single run reads and writes."""
    config: RunConfig
    worktree: Path
    result: RunResult = field(default_factory=RunResult)
    errors: ErrorAggregator = field(default_factory=ErrorAggregator)
    branch_outcome: Optional[BranchOutcome] = None
    staged_files: list = field(default_factory=list)
    stages: dict = field(default_factory=dict)

    @classmethod
    def create(cls, config: RunConfig) -> 'RunContext':
        """Create a fresh context working in the configured directory."""
        return cls(config=config, worktree=config.cwd)

    def record_stage(self, stage: str, status: str, duration: float, notes: str = ""):
        """Record stage result."""
        self.stages[stage] = {
            "status": status,
            "duration_seconds": duration,
            "notes": notes,
        }
