# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/encoders/fdf.py

"""Generate FDF (Forms Data Format) payloads.

pdftk does not read UTF-8 from FDF, so values are transliterated to
Latin-1. Field names and values are written without escaping: a value
containing an unbalanced parenthesis yields an FDF that pdftk rejects.
Use XFDF for such values.
"""

import io
import logging

logger = logging.getLogger(__name__)

import fillpdf.core.constants as c
from fillpdf.core.types import Form, form_items
from fillpdf.exceptions import EncodingError


def _encode_name(name) -> bytes:
    name_str = str(name)
    try:
        return name_str.encode("utf-8")
    except UnicodeEncodeError as exc:
        printable = name_str.encode("utf-8", "backslashreplace").decode("utf-8")
        raise EncodingError(printable, name_str, exc.reason, part="name", encoding="UTF-8") from exc


def _encode_value(name, value) -> bytes:
    value_str = str(value)
    try:
        return value_str.encode(c.FDF_VALUE_ENCODING)
    except UnicodeEncodeError as exc:
        raise EncodingError(name, value_str, exc.reason) from exc


def _write_field_as_fdf_to_file(name, value, file):
    """Write one `<< /T (name) /V (value)>>` line to a binary file."""
    name_bytes = _encode_name(name)
    value_bytes = _encode_value(name, value)
    file.write(b"<< /T (" + name_bytes + b") /V (" + value_bytes + b")>>\n")


def write_fdf(form: Form, file):
    """Write the FDF for `form` to the binary file-like object `file`."""
    file.write(c.FDF_HEADER.encode("ascii") + b"\n")
    count = 0
    for name, value in form_items(form):
        _write_field_as_fdf_to_file(name, value, file)
        count += 1
    file.write(c.FDF_FOOTER.encode("ascii") + b"\n")
    logger.debug("Wrote FDF with %d fields", count)


def encode_fdf(form: Form) -> bytes:
    """
    Serialize a form as FDF.

    Raises EncodingError if a value has characters outside Latin-1.
    """
    buffer = io.BytesIO()
    write_fdf(form, buffer)
    return buffer.getvalue()
