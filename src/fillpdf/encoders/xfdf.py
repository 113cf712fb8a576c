# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/fillpdf/encoders/xfdf.py

"""Generate XFDF payloads. XFDF carries UTF-8 natively, so unlike FDF no
transliteration is applied."""

import logging
import re
import xml.etree.ElementTree as ET

logger = logging.getLogger(__name__)

import fillpdf.core.constants as c
from fillpdf.core.types import Form, form_items

# ElementTree serializes the xml namespace with its reserved prefix
_XML_SPACE_ATTR = "{http://www.w3.org/XML/1998/namespace}space"

# Characters outside the XML 1.0 Char production, including lone surrogates
_INVALID_XML_CHARS = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _xml_text(value) -> str:
    """Render `value` as text, replacing characters XML cannot hold with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\ufffd", str(value))


def build_xfdf_tree(form: Form) -> ET.Element:
    root = ET.Element("xfdf", {"xmlns": c.XFDF_NS, _XML_SPACE_ATTR: c.XFDF_XML_SPACE})
    fields = ET.SubElement(root, "fields")
    for name, value in form_items(form):
        field = ET.SubElement(fields, "field", {"name": _xml_text(name)})
        ET.SubElement(field, "value").text = _xml_text(value)
    return root


def encode_xfdf(form: Form) -> bytes:
    """Serialize a form as a UTF-8 XFDF document.

    Characters that XML 1.0 does not allow (most C0 controls, U+FFFE,
    U+FFFF) are replaced with U+FFFD so the document stays well-formed.
    """
    root = build_xfdf_tree(form)
    body = ET.tostring(root, encoding="unicode")
    logger.debug("Built XFDF with %d fields", len(root[0]))
    return (c.XML_HEADER + "\n" + body + "\n").encode("utf-8")
