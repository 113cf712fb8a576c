# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/form_filler.py

"""Fill a PDF form by running pdftk fill_form"""

import logging

logger = logging.getLogger(__name__)

import fillpdf.core.constants as c
from fillpdf.core.types import Form, Options
from fillpdf.encoders.fdf import encode_fdf
from fillpdf.encoders.xfdf import encode_xfdf
from fillpdf.info.metadata import remove_metadata
from fillpdf.utils.paths import (
    absolute_path,
    copy_to_destination,
    prepare_destination,
    require_source,
    scratch_directory,
    write_scratch_file,
)
from fillpdf.utils.process import require_tool, run_tool


def _encode_form(form, use_xfdf):
    if use_xfdf:
        return c.XFDF_FILE_NAME, encode_xfdf(form)
    return c.FDF_FILE_NAME, encode_fdf(form)


def _fill_form_args(source, definition_file, output_file, flatten):
    args = [source, "fill_form", definition_file, "output", output_file]
    if flatten:
        args.append("flatten")
    return args


def fill(form: Form, source, destination=None, options: Options | None = None):
    """
    Fill the form PDF `source` with the values in `form`.

    If `destination` is None the filled PDF is returned as bytes. Otherwise
    it is copied to `destination` and the absolute destination Path is
    returned. An existing destination is only replaced when
    `options.overwrite` is set.

    Raises:
        PathResolutionError, NotFoundError, ToolNotInstalled,
        TemporaryResourceError, EncodingError, ToolInvocationError,
        DestinationExistsError, DestinationWriteError
    """
    opts = options if options is not None else Options()

    source_path = absolute_path(source)
    dest_path = absolute_path(destination) if destination is not None else None
    source_path = require_source(source_path)

    pdftk = require_tool(c.PDFTK)
    exiftool = require_tool(c.EXIFTOOL) if opts.remove_metadata else None

    definition_name, payload = _encode_form(form, opts.use_xfdf)

    with scratch_directory() as tmp_dir:
        definition_file = tmp_dir / definition_name
        output_file = tmp_dir / c.OUTPUT_PDF_NAME
        write_scratch_file(definition_file, payload)

        args = _fill_form_args(source_path, definition_file, output_file, opts.flatten)
        run_tool(pdftk, args, cwd=tmp_dir, timeout=opts.timeout)
        logger.info("Filled form '%s'", source_path)

        if opts.remove_metadata:
            output_file = remove_metadata(
                output_file, tmp_dir, pdftk, exiftool, timeout=opts.timeout
            )

        if dest_path is None:
            return output_file.read_bytes()

        prepare_destination(dest_path, opts.overwrite)
        copy_to_destination(output_file, dest_path)
        return dest_path
