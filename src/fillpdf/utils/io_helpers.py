# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/utils/io_helpers.py

import sys
from contextlib import contextmanager


@contextmanager
def smart_open_output(filename, mode="w"):
    """Open `filename` for writing, or stdout if it is None or '-'."""
    if filename is None or filename == "-":
        if "b" in mode:
            yield sys.stdout.buffer
        else:
            yield sys.stdout
        return
    encoding = None if "b" in mode else "utf-8"
    with open(filename, mode, encoding=encoding) as f:
        yield f
