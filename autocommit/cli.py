#!/usr/bin/env python3
"""autocommit CLI entrypoint."""

import argparse
import logging
import os
import sys
from pathlib import Path

from autocommit import __version__
from autocommit.lib import actions
from autocommit.lib.config import ConfigError, collect_inputs, load_run_config
from autocommit.lib.constants import EXIT_CONFIG_ERROR, EXIT_OK, EXIT_RUN_FAILED
from autocommit.runner.context import RunContext
from autocommit.runner.engine import run_once
from autocommit.runner.errors import DeferredError, MultipleRuntimeErrors
from autocommit.runner.stages import StageError

logger = logging.getLogger("autocommit")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )


def load_config(args):
    """Collect and resolve inputs. Raises ConfigError."""
    environ = dict(os.environ)
    base_dir = Path(args.directory) if args.directory else Path.cwd()
    inputs = collect_inputs(environ, args.env_file)
    return load_run_config(inputs, environ, base_dir)


def cmd_run(args):
    try:
        config = load_config(args)
    except ConfigError as e:
        actions.error(str(e))
        return EXIT_CONFIG_ERROR

    logger.info(f"Running in {config.cwd}")
    ctx = RunContext.create(config)
    exit_code = EXIT_OK
    try:
        run_once(ctx)
    except (StageError, DeferredError, MultipleRuntimeErrors) as e:
        actions.error(str(e))
        exit_code = EXIT_RUN_FAILED

    outputs = ctx.result.outputs()
    actions.log_outputs(outputs)
    actions.write_outputs(outputs)
    return exit_code


def cmd_check(args):
    try:
        config = load_config(args)
    except ConfigError as e:
        actions.error(str(e))
        return EXIT_CONFIG_ERROR

    print(f"Working directory: {config.cwd}")
    print(f"Add:               {config.add.groups or '-'}")
    print(f"Remove:            {config.remove.groups or '-'}")
    print(f"Author:            {config.author}")
    print(f"Committer:         {config.committer}")
    print(f"Message:           {config.message}")
    print(f"Branch:            {config.branch} ({config.branch_mode.value})")
    print(f"Pathspec errors:   {config.pathspec_policy.value}")
    print(f"Pull:              {config.pull!r}")
    print(f"Push:              {config.push!r}")
    print(f"Tag:               {config.tag_args or '-'}")
    return EXIT_OK


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='autocommit',
        description='Commit, tag and push working-tree changes',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug output')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # autocommit run
    p_run = subparsers.add_parser('run', help='Stage, commit, tag and push')
    p_run.add_argument('-C', dest='directory', help='Base directory (the cwd input is relative to it)')
    p_run.add_argument('--env-file', help='Read inputs from a KEY=value file')
    p_run.set_defaults(func=cmd_run)

    # autocommit check
    p_check = subparsers.add_parser('check', help='Validate inputs and show the resolved configuration')
    p_check.add_argument('-C', dest='directory', help='Base directory (the cwd input is relative to it)')
    p_check.add_argument('--env-file', help='Read inputs from a KEY=value file')
    p_check.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
