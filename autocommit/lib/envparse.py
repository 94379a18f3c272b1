"""
Safe .env file parser for action inputs.

Parses KEY=value files without shell execution. Keys are input names,
optionally written in the INPUT_<NAME> form used by GitHub Actions.
Values are passed to git as argument lists, never through a shell.
"""

import re
from pathlib import Path

KEY_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9_ -]*$')

INPUT_PREFIX = "INPUT_"


def input_name(key: str) -> str:
    """Normalize an env key (ADD, INPUT_AUTHOR_NAME, author_name) to an input name."""
    key = key.strip()
    if key.upper().startswith(INPUT_PREFIX):
        key = key[len(INPUT_PREFIX):]
    return key.lower().replace(" ", "_")


def load_env(filepath: str) -> dict:
    """
    Parse env file safely, return dict keyed by input name.

    Raises:
        FileNotFoundError: if file doesn't exist
        ValueError: if syntax invalid
    """
    result = {}
    path = Path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"Env file not found: {filepath}")

    for lineno, line in enumerate(path.read_text().splitlines(), 1):
        line = line.strip()

        # Skip empty and comments
        if not line or line.startswith('#'):
            continue

        # Must have =
        if '=' not in line:
            raise ValueError(f"Line {lineno}: Invalid syntax (no '=')")

        key, _, value = line.partition('=')
        key = key.strip()
        value = value.strip()

        if not KEY_PATTERN.match(key):
            raise ValueError(f"Line {lineno}: Invalid key '{key}'")

        # Strip quotes if present
        if len(value) >= 2:
            if (value.startswith('"') and value.endswith('"')) or \
               (value.startswith("'") and value.endswith("'")):
                value = value[1:-1]

        result[input_name(key)] = value

    return result


def inputs_from_environ(environ: dict) -> dict:
    """Collect INPUT_* variables from an environment mapping, keyed by input name."""
    return {
        input_name(key): value
        for key, value in environ.items()
        if key.upper().startswith(INPUT_PREFIX)
    }
