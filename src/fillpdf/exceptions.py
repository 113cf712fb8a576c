# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/exceptions.py

"""Exceptions raised by fillpdf"""


class FillPdfError(Exception):
    """Base class for all fillpdf errors"""


class UserCommandLineError(FillPdfError):
    """Invalid command line usage"""


class MissingArgumentError(UserCommandLineError):
    """A required command line argument was not given"""


class InvalidArgumentError(UserCommandLineError):
    """A command line argument could not be understood"""


class PathResolutionError(FillPdfError):
    """An absolute path could not be computed"""


class NotFoundError(FillPdfError, FileNotFoundError):
    """The source PDF file does not exist"""


class ToolNotInstalled(FillPdfError):
    """An external executable could not be found on the PATH"""

    def __init__(self, tool):
        self.tool = tool
        super().__init__(f"{tool} utility is not installed")


class TemporaryResourceError(FillPdfError):
    """Scratch storage could not be created"""


class EncodingError(FillPdfError, ValueError):
    """A form field name or value cannot be represented in the FDF character set"""

    def __init__(self, field_name, value, reason=None, part="value", encoding="Latin-1"):
        self.field_name = field_name
        self.value = value
        message = f"{part} of field '{field_name}' cannot be encoded as {encoding}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ToolInvocationError(FillPdfError):
    """An external tool exited with an error"""

    def __init__(self, tool, returncode=None, stderr=""):
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr or f"exit status {returncode}"
        super().__init__(f"{tool} error: {detail}")


class DestinationExistsError(FillPdfError, FileExistsError):
    """The destination file exists and overwriting was not allowed"""


class DestinationWriteError(FillPdfError):
    """The result could not be written to its destination"""
