"""
Parsing helpers for raw input strings.

Inputs arrive as plain strings. Staging specs may hold a list of
argument strings (JSON or YAML); argument strings are split with POSIX
shell rules so quoting works the way it does on a command line.
"""

import json
import logging
import shlex

import yaml

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "True", "TRUE"}
FALSE_VALUES = {"false", "False", "FALSE"}


def _is_string_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def parse_input_array(value: str) -> list[str]:
    """
    Parse a staging input into argument strings.

    A JSON array of strings or a YAML sequence of strings yields one entry
    per element. Anything else is a single argument string.
    """
    try:
        parsed = json.loads(value)
        if _is_string_list(parsed):
            return parsed
    except json.JSONDecodeError:
        pass

    try:
        parsed = yaml.safe_load(value)
        if _is_string_list(parsed):
            return parsed
    except yaml.YAMLError:
        pass

    return [value]


def split_args(value: str | None) -> list[str]:
    """Split an argument string into tokens. Empty/None gives []."""
    if not value:
        return []
    return shlex.split(value)


def parse_bool(value: str) -> bool | None:
    """
    Parse a boolean input.

    Returns True/False for the accepted spellings, None for anything else.
    """
    value = value.strip()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None
