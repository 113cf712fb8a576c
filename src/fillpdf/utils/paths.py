# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/utils/paths.py

"""Filesystem helpers: path resolution, scratch directories and copying"""

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

import fillpdf.core.constants as c
from fillpdf.exceptions import (
    DestinationExistsError,
    DestinationWriteError,
    NotFoundError,
    PathResolutionError,
    TemporaryResourceError,
)


def absolute_path(path) -> Path:
    """Return `path` as an absolute Path."""
    try:
        return Path(os.path.abspath(os.fspath(path)))
    except (OSError, TypeError, ValueError) as exc:
        raise PathResolutionError(f"failed to create the absolute path: {exc}") from exc


def require_source(path) -> Path:
    """Resolve `path` and make sure it names an existing file."""
    source = absolute_path(path)
    try:
        exists = source.exists()
    except OSError as exc:
        raise NotFoundError(f"failed to check if form PDF file exists: {exc}") from exc
    if not exists:
        raise NotFoundError(f"form PDF file does not exist: '{source}'")
    return source


@contextmanager
def scratch_directory():
    """
    Yield a fresh temporary directory, removed again on every exit path.
    A failure to remove it is logged, not raised.
    """
    try:
        tmp_dir = tempfile.mkdtemp(prefix=c.TEMP_DIR_PREFIX)
    except OSError as exc:
        raise TemporaryResourceError(f"failed to create temporary directory: {exc}") from exc

    logger.debug("Created temporary directory '%s'", tmp_dir)
    try:
        yield Path(tmp_dir)
    finally:
        try:
            shutil.rmtree(tmp_dir)
        except OSError as exc:
            logger.warning("Failed to remove temporary directory '%s' again: %s", tmp_dir, exc)


def write_scratch_file(path: Path, data: bytes):
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise TemporaryResourceError(f"failed to write '{path}': {exc}") from exc


def prepare_destination(destination: Path, overwrite: bool):
    """
    Refuse an existing destination unless `overwrite`, in which case
    the old file is removed.
    """
    if not os.path.lexists(destination):
        return
    if not overwrite:
        raise DestinationExistsError(f"destination PDF file already exists: '{destination}'")
    try:
        destination.unlink()
    except OSError as exc:
        raise DestinationWriteError(f"failed to remove destination PDF file: {exc}") from exc
    logger.debug("Removed existing destination '%s'", destination)


def copy_to_destination(source: Path, destination: Path):
    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise DestinationWriteError(
            f"failed to copy created output PDF to final destination: {exc}"
        ) from exc
    logger.info("Wrote '%s'", destination)
