# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/fields/parse_fields.py

"""Parse the stanza output of pdftk dump_data_fields"""

import fillpdf.core.constants as c
from fillpdf.core.types import FieldDescriptor


def _parse_field_block(lines):
    data = {}
    for line in lines:
        parts = line.split(c.FIELD_KEY_SEPARATOR, 1)
        if len(parts) != 2:
            continue
        key, value = parts
        attr = c.FIELD_KEY_MAP.get(key)
        if attr is None:
            continue
        data[attr] = value.lower() if attr == "type" else value
    return FieldDescriptor(**data)


def parse_field_dump(text):
    """
    Parses 'dump_data_fields' output into a list of FieldDescriptor.

    Example input:
    FieldType: Text
    FieldName: field_1
    FieldFlags: 0
    ---

    Blocks with fewer than three lines (preamble, trailing separator) are
    skipped, as are lines and keys that are not understood. This never
    raises on malformed input.
    """
    text = text.replace("\r\n", "\n")
    fields = []
    for block in text.split(c.FIELD_SEPARATOR):
        lines = block.split("\n")
        if len(lines) < c.MIN_FIELD_BLOCK_LINES:
            continue
        fields.append(_parse_field_block(lines))
    return fields
