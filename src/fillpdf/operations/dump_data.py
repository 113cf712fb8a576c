# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/operations/dump_data.py

"""Dump document info metadata"""

from fillpdf.core.registry import register_operation
from fillpdf.core.types import DocInfoEntry, OpResult
from fillpdf.exceptions import InvalidArgumentError
from fillpdf.info.metadata import get_metadata
from fillpdf.info.parse_info import write_info
from fillpdf.utils.io_helpers import smart_open_output


def dump_info_cli_hook(result, options):
    if not result.success:
        return
    entries = [DocInfoEntry(key=key, value=value) for key, value in result.data.items()]
    with smart_open_output(options.get("output")) as f:
        f.write(write_info(entries))


@register_operation(
    "dump_data",
    desc="Print PDF document info metadata",
    usage="<input> dump_data [output <file>]",
    long_desc="""

Prints the document info dictionary (title, author, producer
and so on) of the input PDF as `InfoBegin` / `InfoKey` /
`InfoValue` stanzas, as read by `pdftk dump_data_utf8`.
""",
    cli_hook=dump_info_cli_hook,
)
def dump_data(input_filename, op_args, options) -> OpResult:
    if op_args:
        raise InvalidArgumentError(f"Unexpected arguments: {' '.join(op_args)}")
    return OpResult(success=True, data=get_metadata(input_filename))
