"""Git command runner with timeout handling and failure classification."""

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60

# Wordings git commit uses when the index matches HEAD
NOTHING_TO_COMMIT_SIGNATURES = (
    "nothing to commit",
    "nothing added to commit",
    "no changes added to commit",
)


class GitFailure(Enum):
    """Why a git command failed. Decided once, here, from git's own output."""
    NONE = "none"
    PATHSPEC_NO_MATCH = "pathspec_no_match"
    NOTHING_TO_COMMIT = "nothing_to_commit"
    TIMED_OUT = "timed_out"
    NOT_FOUND = "not_found"
    OTHER = "other"


def classify_failure(returncode: int, stdout: str, stderr: str) -> GitFailure:
    """Map a git exit status and output to a GitFailure category."""
    if returncode == 0:
        return GitFailure.NONE
    message = f"{stderr}\n{stdout}"
    if "fatal: pathspec" in message and "did not match any files" in message:
        return GitFailure.PATHSPEC_NO_MATCH
    # git commit exits 1 and explains on stdout
    if any(signature in message for signature in NOTHING_TO_COMMIT_SIGNATURES):
        return GitFailure.NOTHING_TO_COMMIT
    return GitFailure.OTHER


@dataclass
class GitResult:
    """Result of a git command."""
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False
    failure: GitFailure = GitFailure.NONE

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out

    @property
    def message(self) -> str:
        """Human-readable failure text (stderr, falling back to stdout)."""
        return (self.stderr.strip() or self.stdout.strip())


def run_git(
    args: list[str],
    cwd: Path,
    timeout: int = DEFAULT_TIMEOUT,
) -> GitResult:
    """
    Run a git command with timeout handling.

    Args:
        args: Git command arguments (e.g., ["add", "src/"])
        cwd: Working directory for the command
        timeout: Timeout in seconds

    Returns:
        GitResult with returncode, stdout, stderr, timed_out flag and
        the classified failure category
    """
    cmd = ["git", "-C", str(cwd)] + args
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return GitResult(
            returncode=-1,
            stdout="",
            stderr=f"Command timed out after {timeout}s",
            timed_out=True,
            failure=GitFailure.TIMED_OUT,
        )
    except FileNotFoundError as e:
        return GitResult(
            returncode=-1,
            stdout="",
            stderr=f"git executable not found: {e}",
            failure=GitFailure.NOT_FOUND,
        )

    failure = classify_failure(result.returncode, result.stdout, result.stderr)
    if failure != GitFailure.NONE:
        logger.debug(f"git {args[0] if args else ''} failed ({failure.value}): {result.stderr.strip()}")
    return GitResult(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
        failure=failure,
    )
