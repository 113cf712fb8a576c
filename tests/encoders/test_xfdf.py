import xml.etree.ElementTree as ET

import pytest

from fillpdf.encoders.fdf import encode_fdf
from fillpdf.encoders.xfdf import build_xfdf_tree, encode_xfdf
from fillpdf.exceptions import EncodingError

NS = "{http://ns.adobe.com/xfdf/}"


def _parse(content):
    root = ET.fromstring(content)
    return root, {
        f.get("name"): f.find(f"{NS}value").text or ""
        for f in root.iter(f"{NS}field")
    }


def test_xfdf_prolog_and_root():
    content = encode_xfdf({"field_1": "Hello"})
    text = content.decode("utf-8")

    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<xfdf ')
    assert 'xmlns="http://ns.adobe.com/xfdf/"' in text
    assert 'xml:space="preserve"' in text
    assert text.endswith("</xfdf>\n")


def test_xfdf_structure():
    root, values = _parse(encode_xfdf({"field_1": "Hello", "field_2": "World"}))

    assert root.tag == f"{NS}xfdf"
    assert root.get("{http://www.w3.org/XML/1998/namespace}space") == "preserve"
    fields = root.findall(f"{NS}fields")
    assert len(fields) == 1
    assert values == {"field_1": "Hello", "field_2": "World"}


def test_xfdf_keeps_non_latin1_values():
    form = {"greeting": "Smile ☺", "price": "€100", "name": "日本"}

    with pytest.raises(EncodingError):
        encode_fdf(form)

    _, values = _parse(encode_xfdf(form))
    assert values == form


def test_xfdf_escapes_markup():
    form = {"a<b": 'x & "y" <z>', "paren": "(unbalanced"}
    _, values = _parse(encode_xfdf(form))
    assert values == form


def test_xfdf_converts_values_to_text():
    _, values = _parse(encode_xfdf({"n": 7, "flag": False}))
    assert values == {"n": "7", "flag": "False"}


def test_xfdf_mapping_is_sorted_and_pairs_are_not():
    sorted_tree = build_xfdf_tree({"b": 1, "a": 2})
    assert [f.get("name") for f in sorted_tree.iter("field")] == ["a", "b"]

    pair_tree = build_xfdf_tree([("b", 1), ("a", 2)])
    assert [f.get("name") for f in pair_tree.iter("field")] == ["b", "a"]


def test_xfdf_empty_form_has_empty_fields_element():
    root, values = _parse(encode_xfdf({}))
    assert values == {}
    assert root.find(f"{NS}fields") is not None


def test_xfdf_replaces_characters_xml_cannot_hold():
    form = {"esc": "a\x1bb", "vtab": "tab\x0bvt", "nonchar": "x\uffff", "bad\x01name": "ok"}

    _, values = _parse(encode_xfdf(form))

    assert values == {
        "esc": "a\ufffdb",
        "vtab": "tab\ufffdvt",
        "nonchar": "x\ufffd",
        "bad\ufffdname": "ok",
    }


def test_xfdf_keeps_allowed_whitespace_and_astral_characters():
    form = {"multi": "line 1\nline 2\tend", "emoji": "\U0001f600"}
    _, values = _parse(encode_xfdf(form))
    assert values == form
