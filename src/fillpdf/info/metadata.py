# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/info/metadata.py

"""Read and strip PDF document metadata with pdftk and exiftool"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

import fillpdf.core.constants as c
from fillpdf.core.types import DocInfoEntry
from fillpdf.info.parse_info import parse_info_dump, write_info
from fillpdf.utils.paths import require_source, write_scratch_file
from fillpdf.utils.process import require_tool, run_tool


def dump_info(pdftk, pdf_path, timeout=None) -> list[DocInfoEntry]:
    output = run_tool(pdftk, [pdf_path, "dump_data_utf8"], timeout=timeout)
    return parse_info_dump(output.decode("utf-8", errors="replace"))


def get_metadata(source, timeout=None) -> dict[str, str]:
    """Return the document info dictionary of `source` as {key: value}."""
    source_path = require_source(source)
    pdftk = require_tool(c.PDFTK)
    return {entry.key: entry.value for entry in dump_info(pdftk, source_path, timeout)}


def remove_metadata(pdf_path: Path, workdir: Path, pdftk, exiftool, timeout=None) -> Path:
    """
    Strip the metadata of `pdf_path`, returning the path of the clean copy.

    exiftool empties the XMP and info tags in place. Its edits are appended
    as an incremental update, so pdftk then rewrites the file with every
    remaining info value blanked, which drops the earlier revision too.
    """
    run_tool(exiftool, ["-all:all=", "-overwrite_original", pdf_path], timeout=timeout)

    entries = dump_info(pdftk, pdf_path, timeout)
    blanked = [DocInfoEntry(key=entry.key, value="") for entry in entries]
    info_file = workdir / c.INFO_FILE_NAME
    write_scratch_file(info_file, write_info(blanked).encode("utf-8"))

    clean_file = workdir / c.CLEAN_PDF_NAME
    run_tool(
        pdftk,
        [pdf_path, "update_info_utf8", info_file, "output", clean_file],
        cwd=workdir,
        timeout=timeout,
    )
    logger.info("Removed metadata (%d info entries blanked)", len(blanked))
    return clean_file
