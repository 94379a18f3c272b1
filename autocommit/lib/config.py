"""
Configuration loader for autocommit.

Collects raw inputs (defaults, an optional .env file, then INPUT_*
environment variables), validates them, and resolves them into a
RunConfig the pipeline can use without re-checking anything.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from . import actions
from . import envparse
from . import validate
from .constants import (
    GITHUB_ACTIONS_EMAIL,
    GITHUB_ACTIONS_NAME,
    NO_PULL,
    NOREPLY_DOMAIN,
)
from .github import UserInfo, get_user_info
from .inputs import parse_bool, parse_input_array, split_args
from .types import (
    BranchMode,
    CustomPush,
    DefaultUpstream,
    Identity,
    NoPush,
    PathspecPolicy,
    PullArgs,
    PullDirective,
    PushDirective,
    SkipPull,
    StagingOperation,
)

logger = logging.getLogger(__name__)

DEFAULT_INPUTS = {
    "add": ".",
    "remove": "",
    "author_name": "",
    "author_email": "",
    "committer_name": "",
    "committer_email": "",
    "default_author": "github_actor",
    "message": "",
    "commit": "",
    "branch": "",
    "branch_mode": "throw",
    "pathspec_error_handling": "ignore",
    "pull": "",
    "push": "true",
    "tag": "",
    "cwd": ".",
    "github_token": "",
}


class ConfigError(Exception):
    """Inputs are missing or invalid. Raised before any git command runs."""


@dataclass
class RunConfig:
    """Resolved configuration for a single run."""
    add: StagingOperation
    remove: StagingOperation
    author: Identity
    committer: Identity
    message: str
    commit_args: list[str]
    branch: str
    branch_mode: BranchMode
    pathspec_policy: PathspecPolicy
    pull: PullDirective
    push: PushDirective
    tag_args: list[str]
    cwd: Path


def collect_inputs(environ: dict, env_file: str | None = None) -> dict:
    """
    Merge input sources into one dict keyed by input name.

    Precedence (lowest first): built-in defaults, env file, INPUT_* variables.
    """
    inputs = dict(DEFAULT_INPUTS)
    if env_file:
        try:
            inputs.update(envparse.load_env(env_file))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read inputs from {env_file}: {e}") from e
    inputs.update(envparse.inputs_from_environ(environ))
    return inputs


def _split(name: str, value: str) -> list[str]:
    try:
        return split_args(value)
    except ValueError as e:
        raise ConfigError(f"Cannot parse '{name}' input ({e}): {value}") from e


def parse_staging(name: str, command: str, value: str) -> StagingOperation:
    """Parse an add/remove input into a StagingOperation."""
    if not value:
        return StagingOperation(command)

    groups = [_split(name, entry) for entry in parse_input_array(value)]
    if len(groups) < 1:
        raise ConfigError(f"'{name}' input: array length < 1")
    if len(groups) == 1:
        logger.info(f"{name.capitalize()} input parsed as single string, running 1 git {command} command.")
    else:
        logger.info(f"{name.capitalize()} input parsed as string array, running {len(groups)} git {command} commands.")
    return StagingOperation(command, groups)


def parse_push(value: str) -> PushDirective:
    """true -> DefaultUpstream, false/empty -> NoPush, anything else -> CustomPush."""
    as_bool = parse_bool(value) if value else False
    if as_bool is True:
        directive = DefaultUpstream()
    elif as_bool is False:
        directive = NoPush()
    else:
        directive = CustomPush(tuple(_split("push", value)))
    logger.debug(f"Current push option: '{value}' (parsed as {type(directive).__name__})")
    return directive


def parse_pull(value: str) -> PullDirective:
    if not value:
        return None
    if value == NO_PULL:
        logger.debug("NO-PULL found: won't pull from remote.")
        return SkipPull()
    return PullArgs(tuple(_split("pull", value)))


def default_branch(environ: dict) -> str:
    """The branch the triggering event ran on (PR head ref for pull_request events)."""
    if "pull_request" in environ.get("GITHUB_EVENT_NAME", ""):
        event_path = environ.get("GITHUB_EVENT_PATH")
        if event_path and Path(event_path).exists():
            try:
                event = json.loads(Path(event_path).read_text())
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid event payload in {event_path}: {e}") from e
            head = (event.get("pull_request") or {}).get("head") or {}
            return head.get("ref") or ""
        return ""
    ref = environ.get("GITHUB_REF", "")
    if ref.startswith("refs/heads/"):
        return ref[len("refs/heads/"):]
    return ""


def resolve_author(
    inputs: dict,
    environ: dict,
    lookup: Callable[[str, str | None], UserInfo | None] = get_user_info,
) -> Identity:
    """Fill in author name/email from default_author where they were not given."""
    actor = environ.get("GITHUB_ACTOR", "")
    actor_email = f"{actor}@{NOREPLY_DOMAIN}"
    mode = inputs["default_author"]

    if mode == "github_actions":
        name, email = GITHUB_ACTIONS_NAME, GITHUB_ACTIONS_EMAIL
    elif mode == "user_info" and not (inputs["author_name"] and inputs["author_email"]):
        token = inputs.get("github_token") or None
        if not token:
            actions.warning("No github_token has been detected, the user lookup may fail")
        info = lookup(actor, token)
        name = info.name if info else None
        email = info.email if info else None
        if not name:
            actions.warning("Couldn't fetch author name, filling with github_actor.")
            name = actor
        if not email:
            actions.warning("Couldn't fetch author email, filling with github_actor.")
            email = actor_email
    else:
        name, email = actor, actor_email

    return Identity(
        name=inputs["author_name"] or name,
        email=inputs["author_email"] or email,
    )


def load_run_config(
    inputs: dict,
    environ: dict,
    base_dir: Path,
    lookup: Callable[[str, str | None], UserInfo | None] = get_user_info,
) -> RunConfig:
    """
    Validate raw inputs and resolve them into a RunConfig.

    Raises:
        ConfigError: if any input is missing or invalid
    """
    try:
        validate.validate_inputs(inputs)
    except validate.ValidationError as e:
        raise ConfigError(str(e)) from e

    if not inputs["add"] and not inputs["remove"]:
        raise ConfigError("Both 'add' and 'remove' are empty, there is nothing to do.")

    add = parse_staging("add", "add", inputs["add"])
    remove = parse_staging("remove", "rm", inputs["remove"])

    author = resolve_author(inputs, environ, lookup)
    logger.info(f"> Using '{author}' as author.")

    if inputs["committer_name"] or inputs["committer_email"]:
        logger.info(
            "> Using custom committer info: "
            f"{inputs['committer_name'] or author.name + ' [from author info]'} "
            f"<{inputs['committer_email'] or author.email + ' [from author info]'}>"
        )
    committer = Identity(
        name=inputs["committer_name"] or author.name,
        email=inputs["committer_email"] or author.email,
    )
    logger.debug(f"Committer: {committer}")

    message = inputs["message"] or f"Commit from GitHub Actions ({environ.get('GITHUB_WORKFLOW', '')})"
    logger.info(f"> Using \"{message}\" as commit message.")

    branch = inputs["branch"] or default_branch(environ)
    if not branch:
        raise ConfigError("No branch given and none could be derived from the environment.")
    if "pull_request" in environ.get("GITHUB_EVENT_NAME", "") and not inputs["branch"]:
        logger.info(f"> Running for a PR, using '{branch}' as ref.")

    return RunConfig(
        add=add,
        remove=remove,
        author=author,
        committer=committer,
        message=message,
        commit_args=_split("commit", inputs["commit"]),
        branch=branch,
        branch_mode=BranchMode(inputs["branch_mode"]),
        pathspec_policy=PathspecPolicy(inputs["pathspec_error_handling"]),
        pull=parse_pull(inputs["pull"]),
        push=parse_push(inputs["push"]),
        tag_args=_split("tag", inputs["tag"]),
        cwd=(base_dir / inputs["cwd"]).resolve() if inputs["cwd"] else base_dir,
    )
