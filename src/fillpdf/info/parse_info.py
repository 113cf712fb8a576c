# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/info/parse_info.py

"""Read and write the document info stanzas of pdftk dump_data.

Public methods:

parse_info_dump
write_info

"""

import logging

logger = logging.getLogger(__name__)

import fillpdf.core.constants as c
from fillpdf.core.types import DocInfoEntry


def parse_info_dump(text) -> list[DocInfoEntry]:
    """
    Extracts the Info dictionary from 'dump_data' output.

    Example input:
    InfoBegin
    InfoKey: Title
    InfoValue: My Document
    NumberOfPages: 1

    Only InfoBegin/InfoKey/InfoValue lines are considered. A key without a
    value gets an empty value; a value without a key is dropped.
    """
    entries = []
    key = None
    value = None

    def flush():
        if key is not None:
            entries.append(DocInfoEntry(key=key, value=value or ""))

    for line in text.replace("\r\n", "\n").split("\n"):
        if line == c.INFO_BEGIN:
            flush()
            key, value = None, None
            continue
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        rest = rest[1:] if rest.startswith(" ") else rest
        if name == c.INFO_KEY:
            key = rest
        elif name == c.INFO_VALUE:
            value = rest
    flush()

    logger.debug("Parsed %d info entries", len(entries))
    return entries


def write_info(entries) -> str:
    """Format entries in the style of pdftk dump_data, ready for update_info"""
    lines = []
    for entry in entries:
        lines.extend(
            [c.INFO_BEGIN, f"{c.INFO_KEY}: {entry.key}", f"{c.INFO_VALUE}: {entry.value}"]
        )
    return "\n".join(lines) + "\n" if lines else ""
