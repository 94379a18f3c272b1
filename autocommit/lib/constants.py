"""Shared constants for autocommit."""

DEFAULT_REMOTE = "origin"

# `pull` input value that disables pulling
NO_PULL = "NO-PULL"

# Pull arguments used for a branch that already existed
DEFAULT_PULL_ARGS = ["--no-rebase"]

# Fetch arguments used before switching branches
FETCH_TAGS_ARGS = ["--tags", "--force"]

GITHUB_ACTIONS_NAME = "github-actions"
GITHUB_ACTIONS_EMAIL = "41898282+github-actions[bot]@users.noreply.github.com"
NOREPLY_DOMAIN = "users.noreply.github.com"

# Exit codes
EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_CONFIG_ERROR = 2
