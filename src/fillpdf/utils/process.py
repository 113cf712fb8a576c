# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/utils/process.py

"""Locate and run the external tools fillpdf delegates to"""

import logging
import os
import shlex
import shutil
import subprocess

logger = logging.getLogger(__name__)

from fillpdf.core.constants import tool_name
from fillpdf.exceptions import ToolInvocationError, ToolNotInstalled


def require_tool(tool) -> str:
    """
    Return the full path of the executable for `tool`.

    Raises ToolNotInstalled if it cannot be found on the PATH.
    """
    name = tool_name(tool)
    resolved = shutil.which(name)
    if resolved is None:
        raise ToolNotInstalled(name)
    return resolved


def run_tool(executable, args, cwd=None, timeout=None) -> bytes:
    """
    Run `executable` with `args`, wait for it and return its stdout.

    A nonzero exit, a failure to start, or a timeout raises
    ToolInvocationError carrying the tool's stderr text.
    """
    label = os.path.basename(str(executable))
    cmd = [str(executable)] + [str(a) for a in args]
    logger.debug("Running: %s", shlex.join(cmd))
    try:
        proc = subprocess.run(cmd, cwd=cwd, capture_output=True, timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        raise ToolInvocationError(label, stderr=f"timed out after {timeout} seconds") from exc
    except OSError as exc:
        raise ToolInvocationError(label, stderr=str(exc)) from exc

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        logger.debug("%s exited with status %d: %s", label, proc.returncode, stderr)
        raise ToolInvocationError(label, returncode=proc.returncode, stderr=stderr)
    return proc.stdout
