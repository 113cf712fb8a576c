# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/__init__.py

"""Fill PDF forms by way of the pdftk command line toolkit."""

import logging

from fillpdf.core.types import FieldDescriptor, Form, Options
from fillpdf.encoders import encode_fdf, encode_xfdf
from fillpdf.exceptions import (
    DestinationExistsError,
    DestinationWriteError,
    EncodingError,
    FillPdfError,
    NotFoundError,
    PathResolutionError,
    TemporaryResourceError,
    ToolInvocationError,
    ToolNotInstalled,
)
from fillpdf.fields.get_fields import get_fields
from fillpdf.fields.parse_fields import parse_field_dump
from fillpdf.form_filler import fill
from fillpdf.info.metadata import get_metadata

__version__ = "0.3.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DestinationExistsError",
    "DestinationWriteError",
    "EncodingError",
    "FieldDescriptor",
    "FillPdfError",
    "Form",
    "NotFoundError",
    "Options",
    "PathResolutionError",
    "TemporaryResourceError",
    "ToolInvocationError",
    "ToolNotInstalled",
    "encode_fdf",
    "encode_xfdf",
    "fill",
    "get_fields",
    "get_metadata",
    "parse_field_dump",
]
