"""
Shared data types for autocommit.

This module contains the enums and dataclasses that flow between the
configuration layer and the pipeline, kept here to avoid circular imports.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class PathspecPolicy(Enum):
    """What to do when a staging command matches no files."""
    IGNORE = "ignore"
    EXIT_IMMEDIATELY = "exitImmediately"
    EXIT_AT_END = "exitAtEnd"


class BranchMode(Enum):
    """What to do when the target branch does not exist locally."""
    THROW = "throw"
    CREATE = "create"


class BranchOutcome(Enum):
    EXISTING = "existing"
    CREATED = "created"


@dataclass(frozen=True)
class NoPush:
    """Do not push anything."""


@dataclass(frozen=True)
class DefaultUpstream:
    """Push the current branch to origin with upstream tracking."""


@dataclass(frozen=True)
class CustomPush:
    """Push with exactly these arguments."""
    args: tuple[str, ...]


PushDirective = Union[NoPush, DefaultUpstream, CustomPush]


@dataclass(frozen=True)
class SkipPull:
    """Do not pull."""


@dataclass(frozen=True)
class PullArgs:
    args: tuple[str, ...]


# None means "pick the default from the branch outcome"
PullDirective = Union[SkipPull, PullArgs, None]


@dataclass
class StagingOperation:
    """
    A git staging command and its argument groups.

    Each group is one independent invocation, run in the order given.
    """
    command: str  # "add" or "rm"
    groups: list[list[str]] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.groups)


@dataclass
class Identity:
    name: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass
class RunResult:
    """What a run actually did. Fields only ever flip from their defaults."""
    committed: bool = False
    commit_sha: str | None = None
    tagged: bool = False
    pushed: bool = False
    tags_pushed: bool = False

    def outputs(self) -> dict[str, str | None]:
        """The four named outputs reported to the caller."""
        return {
            "committed": str(self.committed).lower(),
            "commit_sha": self.commit_sha,
            "tagged": str(self.tagged).lower(),
            "pushed": str(self.pushed).lower(),
        }
