"""Tests for autocommit.lib.envparse module."""

import pytest

from autocommit.lib.envparse import input_name, inputs_from_environ, load_env


class TestInputName:
    """Test input_name normalization."""

    def test_plain_upper(self):
        assert input_name("AUTHOR_NAME") == "author_name"

    def test_prefixed(self):
        assert input_name("INPUT_PATHSPEC_ERROR_HANDLING") == "pathspec_error_handling"

    def test_already_normalized(self):
        assert input_name("branch_mode") == "branch_mode"


class TestLoadEnv:
    """Test load_env parsing."""

    def test_parses_values(self, tmp_path):
        path = tmp_path / "inputs.env"
        path.write_text(
            "# comment\n"
            "\n"
            "ADD=src\n"
            "INPUT_MESSAGE=\"Update docs; regenerate | format\"\n"
            "tag='v1.0'\n"
        )
        assert load_env(str(path)) == {
            "add": "src",
            "message": "Update docs; regenerate | format",
            "tag": "v1.0",
        }

    def test_value_may_contain_equals(self, tmp_path):
        path = tmp_path / "inputs.env"
        path.write_text("PUSH=--push-option=ci.skip\n")
        assert load_env(str(path)) == {"push": "--push-option=ci.skip"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_env(str(tmp_path / "nope.env"))

    def test_line_without_equals(self, tmp_path):
        path = tmp_path / "inputs.env"
        path.write_text("ADD src\n")
        with pytest.raises(ValueError, match="Line 1"):
            load_env(str(path))

    def test_invalid_key(self, tmp_path):
        path = tmp_path / "inputs.env"
        path.write_text("ADD=.\n1BAD=x\n")
        with pytest.raises(ValueError, match="Line 2"):
            load_env(str(path))


class TestInputsFromEnviron:
    """Test inputs_from_environ filtering."""

    def test_only_input_variables(self):
        environ = {"INPUT_ADD": ".", "INPUT_AUTHOR_NAME": "Jane", "PATH": "/usr/bin"}
        assert inputs_from_environ(environ) == {"add": ".", "author_name": "Jane"}
