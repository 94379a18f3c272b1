"""Shared fixtures: a scripted git and a RunConfig factory."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from autocommit.lib.config import RunConfig
from autocommit.lib.types import (
    BranchMode,
    Identity,
    NoPush,
    PathspecPolicy,
    StagingOperation,
)

COMMIT_SHA = "3f786850e387550fdab836ed7e6dc881de23001b"

PATHSPEC_STDERR = "fatal: pathspec '{}' did not match any files\n"


class FakeGit:
    """
    Stand-in for subprocess.run that answers git commands from a script.

    Rules registered with on() match by argument prefix and are consumed
    in order; once a rule runs out of responses, later calls fall through
    to the defaults (success, with sensible output for queries).
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.rules: list[tuple[list[str], list[tuple[int, str, str]], bool]] = []
        self.staged = ["file.txt"]
        self.sha = COMMIT_SHA

    def on(self, *prefix, returncode=0, stdout="", stderr="", times=1, always=False):
        self.rules.append((list(prefix), [(returncode, stdout, stderr)] * times, always))
        return self

    def fail_pathspec(self, *prefix, always=True):
        """Make a staging command report that its pathspec matched nothing."""
        return self.on(*prefix, returncode=128, stderr=PATHSPEC_STDERR.format(prefix[-1]), always=always)

    def __call__(self, cmd, **kwargs):
        assert cmd[:2] == ["git", "-C"]
        args = list(cmd[3:])
        self.calls.append(args)

        for prefix, responses, always in self.rules:
            if args[:len(prefix)] == prefix and responses:
                returncode, stdout, stderr = responses[0] if always else responses.pop(0)
                return MagicMock(returncode=returncode, stdout=stdout, stderr=stderr)

        return MagicMock(returncode=0, stdout=self._default_stdout(args), stderr="")

    def _default_stdout(self, args):
        if args[:3] == ["diff", "--cached", "--name-only"]:
            return "".join(f"{name}\n" for name in self.staged)
        if args[:1] == ["rev-parse"]:
            return self.sha + "\n"
        if args[:2] == ["config", "--list"]:
            return "user.name=Tester\nuser.email=tester@example.com\n"
        if args[:1] == ["commit"]:
            return "[main 3f78685] message\n 1 file changed, 1 insertion(+)\n"
        return ""

    def commands(self, *prefix):
        """Recorded invocations starting with prefix."""
        return [c for c in self.calls if c[:len(prefix)] == list(prefix)]


@pytest.fixture
def fake_git():
    fake = FakeGit()
    with patch("autocommit.git.runner.subprocess.run", side_effect=fake):
        yield fake


@pytest.fixture
def make_config(tmp_path):
    """Build a RunConfig with test defaults; keyword arguments override fields."""

    def factory(**overrides) -> RunConfig:
        values = dict(
            add=StagingOperation("add", [["."]]),
            remove=StagingOperation("rm"),
            author=Identity("Tester", "tester@example.com"),
            committer=Identity("Tester", "tester@example.com"),
            message="Update files",
            commit_args=[],
            branch="main",
            branch_mode=BranchMode.THROW,
            pathspec_policy=PathspecPolicy.IGNORE,
            pull=None,
            push=NoPush(),
            tag_args=[],
            cwd=Path(tmp_path),
        )
        values.update(overrides)
        return RunConfig(**values)

    return factory
