# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/cli/main.py

"""Command line entry point"""

import logging
import sys

logger = logging.getLogger(__name__)

from fillpdf.cli import help as helpmod
from fillpdf.cli.constants import (
    DEBUG_FLAGS,
    EXIT_FAILURE,
    EXIT_MISSING,
    EXIT_OK,
    EXIT_USAGE,
    HELP_FLAGS,
    VERBOSE_FLAGS,
    VERSION_FLAGS,
)
from fillpdf.cli.parse import parse_cli_stage
from fillpdf.core.executor import run_operation
from fillpdf.core.registry import registry
from fillpdf.exceptions import (
    FillPdfError,
    NotFoundError,
    ToolNotInstalled,
    UserCommandLineError,
)
from fillpdf.registry_init import initialize_registry


def _get_flags_and_setup_logging(args):
    """Strip the logging flags from `args` and configure logging."""
    found_flags = {arg for arg in args if arg in VERBOSE_FLAGS | DEBUG_FLAGS}
    remaining = [arg for arg in args if arg not in found_flags]

    level = logging.WARNING
    if found_flags & DEBUG_FLAGS:
        level = logging.DEBUG
    elif found_flags & VERBOSE_FLAGS:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")
    return found_flags, remaining


def _find_help_command(args):
    for arg in args:
        if arg in HELP_FLAGS:
            continue
        if topic := helpmod.find_operator_topic_command(arg):
            return topic
    return None


def _print_help_and_exit(command):
    initialize_registry()
    helpmod.print_help(command=command, dest=sys.stdout, raw=False)
    return EXIT_OK


def _handle_special_flags(args):
    """Handle --version and --help. Returns an exit code, or None to go on."""
    if any(arg in VERSION_FLAGS for arg in args):
        helpmod.print_version(dest=sys.stdout)
        sys.exit(EXIT_OK)
    if args and (args[0] in HELP_FLAGS or "--help" in args):
        initialize_registry()
        return _print_help_and_exit(_find_help_command(args))
    return None


def _exit_code_for(exc):
    if isinstance(exc, UserCommandLineError):
        return EXIT_USAGE
    if isinstance(exc, (ToolNotInstalled, NotFoundError, FileNotFoundError)):
        return EXIT_MISSING
    return EXIT_FAILURE


def main(argv=None):
    if argv is None:
        argv = sys.argv

    if (ret := _handle_special_flags(argv[1:])) is not None:
        return ret

    found_flags, remaining = _get_flags_and_setup_logging(argv[1:])
    if not remaining:
        return _print_help_and_exit(None)

    try:
        initialize_registry()
        stage = parse_cli_stage(remaining)
        result = run_operation(stage.operation, stage.input_filename, stage.op_args, stage.options)
        if result.summary:
            logger.info("[%s] %s", stage.operation, result.summary)
        hook = registry.operations[stage.operation].cli_hook
        if hook:
            hook(result, stage.options)
    except (FillPdfError, OSError, ImportError, ValueError) as exc:
        if found_flags & DEBUG_FLAGS:
            raise
        print(f"Error: {exc}", file=sys.stderr)
        return _exit_code_for(exc)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
