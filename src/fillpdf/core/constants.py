# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/core/constants.py

"""Constants shared across fillpdf"""

import os

PDFTK = "pdftk"
EXIFTOOL = "exiftool"

# Environment variables overriding the executables above
TOOL_ENV_VARS = {
    PDFTK: "FILLPDF_PDFTK",
    EXIFTOOL: "FILLPDF_EXIFTOOL",
}

TEMP_DIR_PREFIX = "fillpdf-"
OUTPUT_PDF_NAME = "output.pdf"
CLEAN_PDF_NAME = "clean.pdf"
FDF_FILE_NAME = "data.fdf"
XFDF_FILE_NAME = "data.xfdf"
INFO_FILE_NAME = "info.txt"

# The marker line after the version is kept byte for byte; some viewers
# sniff it to detect a binary FDF.
FDF_HEADER = """%FDF-1.2
%,,oe"
1 0 obj
<<
/FDF << /Fields ["""

FDF_FOOTER = """]
>>
>>
endobj
trailer
<<
/Root 1 0 R
>>
%%EOF"""

FDF_FIELD_TEMPLATE = "<< /T ({name}) /V ({value})>>"
FDF_VALUE_ENCODING = "latin-1"

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'
XFDF_NS = "http://ns.adobe.com/xfdf/"
XFDF_XML_SPACE = "preserve"

FIELD_SEPARATOR = "---\n"
FIELD_KEY_SEPARATOR = ": "
MIN_FIELD_BLOCK_LINES = 3

# pdftk dump_data_fields keys and the FieldDescriptor attribute they fill
FIELD_KEY_MAP = {
    "FieldType": "type",
    "FieldName": "name",
    "FieldNameAlt": "alt_name",
    "FieldFlags": "flags",
}

INFO_BEGIN = "InfoBegin"
INFO_KEY = "InfoKey"
INFO_VALUE = "InfoValue"


def tool_name(tool):
    """The executable to run for `tool`, honouring its environment override."""
    return os.environ.get(TOOL_ENV_VARS.get(tool, ""), "") or tool
