# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/core/executor.py

"""Run registered operations"""

import logging

logger = logging.getLogger(__name__)

from fillpdf.core.registry import registry
from fillpdf.exceptions import UserCommandLineError


def run_operation(operation_name, input_filename, op_args, options):
    """Look up `operation_name` and call it with the parsed stage."""
    if operation_name not in registry.operations:
        raise UserCommandLineError(f"Unknown operation '{operation_name}'")
    operation = registry.operations[operation_name]
    logger.debug(
        "Running operation '%s' on '%s' with args %s and options %s",
        operation_name,
        input_filename,
        op_args,
        options,
    )
    return operation.function(input_filename, op_args, options)
