"""Git operations for autocommit.

Every git invocation goes through run_git(), which returns a GitResult
whose `failure` field classifies what went wrong. Callers check
`.success` and branch on `.failure`; nothing here raises on git errors.

Return type conventions:
- Functions returning GitResult: Caller must check .success before using output.
  Examples: add(), commit(), push()
- Functions returning parsed values (str, dict): Return None/empty on failure.
  Examples: get_commit_sha() -> None, list_config() -> {}
"""

from autocommit.git.runner import (
    run_git,
    GitResult,
    GitFailure,
)
from autocommit.git.commit import (
    add,
    remove,
    commit,
)
from autocommit.git.branch import (
    checkout_branch,
    create_branch,
    get_commit_sha,
)
from autocommit.git.diff import (
    get_staged_files,
    parse_names,
)
from autocommit.git.tag import (
    create_tag,
    tag_name_from_args,
)
from autocommit.git.remote import (
    fetch,
    pull,
    push,
    push_set_upstream,
    push_tags,
    delete_remote_ref,
)
from autocommit.git.settings import (
    set_config,
    list_config,
)

__all__ = [
    # runner
    "run_git",
    "GitResult",
    "GitFailure",
    # commit
    "add",
    "remove",
    "commit",
    # branch
    "checkout_branch",
    "create_branch",
    "get_commit_sha",
    # diff
    "get_staged_files",
    "parse_names",
    # tag
    "create_tag",
    "tag_name_from_args",
    # remote
    "fetch",
    "pull",
    "push",
    "push_set_upstream",
    "push_tags",
    "delete_remote_ref",
    # settings
    "set_config",
    "list_config",
]
