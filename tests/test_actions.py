"""Tests for autocommit.lib.actions module."""

from autocommit.lib import actions


class TestWriteOutputs:
    """Test write_outputs destinations."""

    def test_appends_to_github_output(self, tmp_path):
        output_file = tmp_path / "output"
        output_file.write_text("earlier=1\n")

        actions.write_outputs(
            {"committed": "true", "commit_sha": "abc", "tagged": "false", "pushed": "false"},
            environ={"GITHUB_OUTPUT": str(output_file)},
        )

        assert output_file.read_text() == (
            "earlier=1\ncommitted=true\ncommit_sha=abc\ntagged=false\npushed=false\n"
        )

    def test_unset_values_are_skipped(self, tmp_path):
        output_file = tmp_path / "output"
        actions.write_outputs(
            {"committed": "false", "commit_sha": None},
            environ={"GITHUB_OUTPUT": str(output_file)},
        )
        assert output_file.read_text() == "committed=false\n"

    def test_prints_without_github_output(self, capsys):
        actions.write_outputs({"pushed": "true"}, environ={})
        assert capsys.readouterr().out == "pushed=true\n"


class TestWorkflowCommands:
    """Groups and annotations under GitHub Actions."""

    def test_group_markers(self, monkeypatch, capsys):
        monkeypatch.setenv("GITHUB_ACTIONS", "true")
        with actions.group("Internal logs"):
            pass
        assert capsys.readouterr().out == "::group::Internal logs\n::endgroup::\n"

    def test_error_is_escaped(self, monkeypatch, capsys):
        monkeypatch.setenv("GITHUB_ACTIONS", "true")
        actions.error("line one\nline two 100%")
        assert capsys.readouterr().out == "::error::line one%0Aline two 100%25\n"

    def test_in_actions(self):
        assert actions.in_actions({"GITHUB_ACTIONS": "true"}) is True
        assert actions.in_actions({}) is False
