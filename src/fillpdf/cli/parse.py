# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/cli/parse.py

"""Parse `<input> <operation> [args...] [keywords...]` command lines"""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

from fillpdf.core.registry import registry
from fillpdf.exceptions import MissingArgumentError, UserCommandLineError


@dataclass
class CliStage:
    input_filename: str
    operation: str
    op_args: list[str] = field(default_factory=list)
    options: dict = field(default_factory=dict)


def parse_cli_stage(args) -> CliStage:
    """
    Split the arguments into input, operation, operation arguments and
    keywords. Keywords are recognised anywhere after the operation.
    """
    if len(args) < 2:
        raise MissingArgumentError("Expected an input file followed by an operation")

    input_filename, op_name, *rest = args
    if op_name not in registry.operations:
        raise UserCommandLineError(f"Unknown operation '{op_name}'")
    operation = registry.operations[op_name]

    stage = CliStage(input_filename=input_filename, operation=op_name)
    queue = list(rest)
    while queue:
        arg = queue.pop(0)
        if arg in operation.keywords:
            if not queue:
                raise MissingArgumentError(f"Keyword '{arg}' requires an argument")
            stage.options[arg] = queue.pop(0)
        elif arg in operation.flags:
            stage.options[arg] = True
        else:
            stage.op_args.append(arg)

    logger.debug("Parsed stage: %s", stage)
    return stage
