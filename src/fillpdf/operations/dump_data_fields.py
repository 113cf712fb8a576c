# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/operations/dump_data_fields.py

"""Dump the form fields of a PDF file"""

import json
import logging
from dataclasses import asdict

logger = logging.getLogger(__name__)

from fillpdf.core.registry import register_operation
from fillpdf.core.types import OpResult
from fillpdf.exceptions import InvalidArgumentError
from fillpdf.fields.get_fields import get_fields
from fillpdf.utils.io_helpers import smart_open_output

_DUMP_DATA_FIELDS_LONG_DESC = """

Lists the interactive form fields of the input PDF, as
reported by `pdftk dump_data_fields_utf8`.

Each field is printed as a stanza:

* `FieldType: <type>` Lower-cased field type (e.g. `text`, `button`).
* `FieldName: <name>` The fully qualified field name.
* `FieldNameAlt: <label>` The alternate (tooltip) name, if any.
* `FieldFlags: <integer>` The field flags bitmask.

Stanzas are separated by `---`. Give the `json` keyword for a
JSON array instead.
"""

_DUMP_DATA_FIELDS_EXAMPLES = [
    {
        "cmd": "form.pdf dump_data_fields",
        "desc": "Print the form fields of form.pdf",
    },
    {
        "cmd": "form.pdf dump_data_fields json output fields.json",
        "desc": "Save the form fields of form.pdf as JSON",
    },
]


def dump_fields_cli_hook(result, options):
    """Formats the field descriptors as stanzas or JSON."""
    if not result.success:
        return

    with smart_open_output(options.get("output")) as f:
        if options.get("json"):
            json.dump([asdict(field) for field in result.data], f, indent=2)
            print(file=f)
            return

        for idx, field in enumerate(result.data):
            if idx:
                print("---", file=f)
            print(f"FieldType: {field.type}", file=f)
            print(f"FieldName: {field.name}", file=f)
            if field.alt_name:
                print(f"FieldNameAlt: {field.alt_name}", file=f)
            print(f"FieldFlags: {field.flags}", file=f)


@register_operation(
    "dump_data_fields",
    desc="Print PDF form field names and types",
    usage="<input> dump_data_fields [json] [output <file>]",
    long_desc=_DUMP_DATA_FIELDS_LONG_DESC,
    examples=_DUMP_DATA_FIELDS_EXAMPLES,
    cli_hook=dump_fields_cli_hook,
    flags=("json",),
)
def dump_data_fields(input_filename, op_args, options) -> OpResult:
    """
    Returns:
        OpResult:
            data: List[FieldDescriptor]
    """
    if op_args:
        raise InvalidArgumentError(f"Unexpected arguments: {' '.join(op_args)}")
    fields = get_fields(input_filename)
    return OpResult(success=True, data=fields)
