# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/operations/fill_form.py

"""Fill a PDF form from a JSON or YAML data file"""

import logging

logger = logging.getLogger(__name__)

from fillpdf.core.registry import register_operation
from fillpdf.core.types import OpResult, Options
from fillpdf.exceptions import InvalidArgumentError, MissingArgumentError
from fillpdf.form_filler import fill
from fillpdf.utils.arg_helpers import load_form_data
from fillpdf.utils.io_helpers import smart_open_output

_FILL_FORM_LONG_DESC = """

Fills the interactive form fields of the input PDF using the
values in `<data>`, a JSON or YAML file holding an object of
`{"field name": value}`. Use `-` to read JSON from stdin.

The values are handed to `pdftk` as an FDF file, which only
supports Latin-1 characters. Give the `xfdf` keyword to send
XFDF instead, which carries any UTF-8 text.

Keywords:

* `output <file>` Write the filled PDF to `<file>` (default: stdout).
* `overwrite` Replace `<file>` if it already exists.
* `no_flatten` Keep the fields editable (flattening is the default).
* `xfdf` Use XFDF instead of FDF.
* `drop_metadata` Strip document metadata (needs `exiftool`).
* `timeout <seconds>` Limit each external tool run.
"""

_FILL_FORM_EXAMPLES = [
    {
        "cmd": "form.pdf fill_form data.json output filled.pdf",
        "desc": "Fill and flatten form.pdf with the values in data.json",
    },
    {
        "cmd": "form.pdf fill_form data.yaml xfdf no_flatten output filled.pdf overwrite",
        "desc": "Fill with UTF-8 values, keeping the fields editable",
    },
]


def fill_form_cli_hook(result, options):
    """Write the filled PDF to stdout when no output file was given."""
    if not result.success or not isinstance(result.data, bytes):
        return
    with smart_open_output(None, "wb") as f:
        f.write(result.data)


def _parse_timeout(options):
    timeout = options.get("timeout")
    if timeout is None:
        return None
    try:
        return float(timeout)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid timeout '{timeout}'") from exc


def options_from_keywords(options) -> Options:
    """Build fill Options from the parsed command line keywords."""
    if options.get("flatten") and options.get("no_flatten"):
        raise InvalidArgumentError("Give at most one of 'flatten' and 'no_flatten'")
    return Options(
        overwrite=bool(options.get("overwrite")),
        flatten=not options.get("no_flatten"),
        remove_metadata=bool(options.get("drop_metadata")),
        use_xfdf=bool(options.get("xfdf")),
        timeout=_parse_timeout(options),
    )


@register_operation(
    "fill_form",
    desc="Fill PDF form fields from JSON or YAML data",
    usage="<input> fill_form <data> [output <file>] [overwrite] [no_flatten] [xfdf]",
    long_desc=_FILL_FORM_LONG_DESC,
    examples=_FILL_FORM_EXAMPLES,
    cli_hook=fill_form_cli_hook,
    flags=("overwrite", "flatten", "no_flatten", "xfdf", "drop_metadata"),
    keywords=("output", "timeout"),
)
def fill_form(input_filename, op_args, options) -> OpResult:
    if not op_args:
        raise MissingArgumentError("fill_form requires a <data> argument")
    if len(op_args) > 1:
        raise InvalidArgumentError(f"Unexpected arguments: {' '.join(op_args[1:])}")

    form = load_form_data(op_args[0])
    fill_options = options_from_keywords(options)
    output = options.get("output")
    if output == "-":
        output = None
    result = fill(form, input_filename, output, fill_options)

    if isinstance(result, bytes):
        return OpResult(success=True, data=result)
    return OpResult(success=True, summary=f"Filled {len(form)} fields into {result}")
