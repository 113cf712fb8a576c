# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/operations/generate_fdf.py

"""Write the FDF or XFDF payload for a data file without running pdftk"""

from fillpdf.core.registry import register_operation
from fillpdf.core.types import OpResult
from fillpdf.encoders.fdf import encode_fdf
from fillpdf.encoders.xfdf import encode_xfdf
from fillpdf.exceptions import InvalidArgumentError
from fillpdf.utils.arg_helpers import load_form_data
from fillpdf.utils.io_helpers import smart_open_output


def generate_cli_hook(result, options):
    if not result.success:
        return
    with smart_open_output(options.get("output"), "wb") as f:
        f.write(result.data)


def _generate(encoder, input_filename, op_args):
    if op_args:
        raise InvalidArgumentError(f"Unexpected arguments: {' '.join(op_args)}")
    return OpResult(success=True, data=encoder(load_form_data(input_filename)))


@register_operation(
    "generate_fdf",
    desc="Write the FDF for a JSON or YAML data file",
    usage="<data> generate_fdf [output <file>]",
    long_desc="""

Converts the form values in `<data>` to the FDF that
`fill_form` would hand to `pdftk`. Values must be Latin-1.
""",
    examples=[{"cmd": "data.json generate_fdf output data.fdf", "desc": "Save data.fdf"}],
    cli_hook=generate_cli_hook,
)
def generate_fdf(input_filename, op_args, options) -> OpResult:
    return _generate(encode_fdf, input_filename, op_args)


@register_operation(
    "generate_xfdf",
    desc="Write the XFDF for a JSON or YAML data file",
    usage="<data> generate_xfdf [output <file>]",
    cli_hook=generate_cli_hook,
)
def generate_xfdf(input_filename, op_args, options) -> OpResult:
    return _generate(encode_xfdf, input_filename, op_args)
