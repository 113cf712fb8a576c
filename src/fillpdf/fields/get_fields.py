# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/fields/get_fields.py

"""List the form fields of a PDF via pdftk dump_data_fields"""

import logging

logger = logging.getLogger(__name__)

import fillpdf.core.constants as c
from fillpdf.core.types import FieldDescriptor
from fillpdf.fields.parse_fields import parse_field_dump
from fillpdf.utils.paths import require_source
from fillpdf.utils.process import require_tool, run_tool


def get_fields(source, timeout=None) -> list[FieldDescriptor]:
    """
    Return the form fields of `source` in document order.

    Raises PathResolutionError, NotFoundError, ToolNotInstalled or
    ToolInvocationError; the parse step itself never fails.
    """
    source_path = require_source(source)
    pdftk = require_tool(c.PDFTK)

    output = run_tool(pdftk, [source_path, "dump_data_fields_utf8"], timeout=timeout)
    fields = parse_field_dump(output.decode("utf-8", errors="replace"))
    logger.debug("Found %d fields in '%s'", len(fields), source_path)
    return fields
