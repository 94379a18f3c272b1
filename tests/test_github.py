"""Tests for autocommit.lib.github module."""

import json
import subprocess
from unittest.mock import patch, MagicMock

from autocommit.lib.github import GH_TIMEOUT_SECONDS, UserInfo, get_user_info


class TestGetUserInfo:
    """Test get_user_info function."""

    @patch("autocommit.lib.github.subprocess.run")
    def test_success(self, mock_run):
        mock_run.return_value = MagicMock(
            returncode=0,
            stdout=json.dumps({"login": "octocat", "name": "The Octocat", "email": None}),
            stderr="",
        )
        assert get_user_info("octocat", "tok") == UserInfo(name="The Octocat", email=None)

        cmd = mock_run.call_args[0][0]
        assert cmd == ["gh", "api", "users/octocat"]
        assert mock_run.call_args[1]["env"]["GH_TOKEN"] == "tok"
        assert mock_run.call_args[1]["timeout"] == GH_TIMEOUT_SECONDS

    @patch("autocommit.lib.github.subprocess.run")
    def test_api_error(self, mock_run):
        mock_run.return_value = MagicMock(returncode=1, stdout="", stderr="HTTP 404")
        assert get_user_info("ghost") is None

    @patch("autocommit.lib.github.subprocess.run")
    def test_invalid_json(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="not json", stderr="")
        assert get_user_info("octocat") is None

    @patch("autocommit.lib.github.subprocess.run")
    def test_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="gh", timeout=GH_TIMEOUT_SECONDS)
        assert get_user_info("octocat") is None

    @patch("autocommit.lib.github.subprocess.run")
    def test_gh_missing(self, mock_run):
        mock_run.side_effect = FileNotFoundError("gh")
        assert get_user_info("octocat") is None

    @patch("autocommit.lib.github.subprocess.run")
    def test_empty_username(self, mock_run):
        assert get_user_info("") is None
        mock_run.assert_not_called()
