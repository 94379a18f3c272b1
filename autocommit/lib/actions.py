"""
Reporting to the invoking workflow runner.

Under GitHub Actions (GITHUB_ACTIONS=true) this emits workflow commands
for log groups, annotations and step outputs. Elsewhere groups and
annotations become plain log lines and outputs are printed as
name=value.
"""

import logging
import os
import sys
from contextlib import contextmanager

logger = logging.getLogger(__name__)


def in_actions(environ=None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get("GITHUB_ACTIONS") == "true"


def _command(line: str) -> None:
    print(line, file=sys.stdout, flush=True)


def start_group(title: str) -> None:
    if in_actions():
        _command(f"::group::{title}")
    else:
        logger.info(f"--- {title}")


def end_group() -> None:
    if in_actions():
        _command("::endgroup::")


@contextmanager
def group(title: str):
    """Wrap log output in a collapsible group."""
    start_group(title)
    try:
        yield
    finally:
        end_group()


def _escape(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error(message: str) -> None:
    if in_actions():
        _command(f"::error::{_escape(message)}")
    else:
        logger.error(message)


def warning(message: str) -> None:
    if in_actions():
        _command(f"::warning::{_escape(message)}")
    else:
        logger.warning(message)


def write_outputs(outputs: dict, environ=None) -> None:
    """
    Publish step outputs. Values that are None are left unset.

    Appends name=value lines to $GITHUB_OUTPUT when it is set, otherwise
    prints them on stdout.
    """
    environ = os.environ if environ is None else environ
    lines = [f"{name}={value}" for name, value in outputs.items() if value is not None]

    output_file = environ.get("GITHUB_OUTPUT")
    if output_file:
        with open(output_file, "a") as f:
            for line in lines:
                f.write(line + "\n")
    else:
        for line in lines:
            print(line, flush=True)


def log_outputs(outputs: dict) -> None:
    """Log every output value, including unset ones."""
    with group("Outputs"):
        for name, value in outputs.items():
            logger.info(f"{name}: {value}")
