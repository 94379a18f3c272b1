"""
GitHub integration helpers.

Looks up public user profiles via the gh CLI, used to fill in the
commit author when default_author is "user_info".
"""

import json
import logging
import os
import subprocess
from typing import NamedTuple

logger = logging.getLogger(__name__)


# Timeout for GitHub CLI operations (seconds)
GH_TIMEOUT_SECONDS = 30


class UserInfo(NamedTuple):
    """Public profile fields of a GitHub user. Either may be None."""
    name: str | None
    email: str | None


def get_user_info(username: str, token: str | None = None) -> UserInfo | None:
    """
    Fetch a user's public name and email with `gh api users/<username>`.

    Returns None when the lookup fails for any reason; callers fall back
    to actor-derived values.
    """
    if not username:
        return None

    env = dict(os.environ)
    if token:
        env["GH_TOKEN"] = token

    try:
        result = subprocess.run(
            ["gh", "api", f"users/{username}"],
            capture_output=True,
            text=True,
            env=env,
            timeout=GH_TIMEOUT_SECONDS,
        )
    except subprocess.TimeoutExpired:
        logger.warning(f"User lookup for {username} timed out after {GH_TIMEOUT_SECONDS}s")
        return None
    except (FileNotFoundError, subprocess.SubprocessError) as e:
        logger.warning(f"User lookup for {username} failed: {e}")
        return None

    if result.returncode != 0:
        logger.warning(f"User lookup for {username} failed: {result.stderr.strip()}")
        return None

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        logger.warning(f"User lookup for {username} returned invalid JSON: {e}")
        return None

    return UserInfo(name=data.get("name") or None, email=data.get("email") or None)
