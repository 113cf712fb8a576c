# Runs the real pdftk binary; skipped when it is not installed.

import pytest

import fillpdf
from fillpdf.core.types import Options

pytestmark = pytest.mark.pdftk


def _field_values(path):
    pikepdf = pytest.importorskip("pikepdf")
    from pikepdf.form import Form

    with pikepdf.open(path) as pdf:
        if "/AcroForm" not in pdf.Root:
            return {}
        return {field.fully_qualified_name: str(field.value) for field in Form(pdf)}


def test_get_fields(form_pdf, require_pdftk):
    fields = fillpdf.get_fields(form_pdf)

    by_name = {f.name: f for f in fields}
    assert set(by_name) == {"field_1", "field_2", "agree"}
    assert by_name["field_1"].type == "text"
    assert by_name["field_1"].alt_name == "First field"
    assert by_name["agree"].type == "button"


def test_fill_without_flatten_keeps_values(form_pdf, tmp_path, require_pdftk):
    dest = tmp_path / "filled.pdf"
    fillpdf.fill(
        {"field_1": "Hello", "field_2": "Wörld"},
        form_pdf,
        dest,
        Options(flatten=False),
    )

    values = _field_values(dest)
    assert values["field_1"] == "Hello"
    assert values["field_2"] == "Wörld"


def test_fill_xfdf_utf8(form_pdf, tmp_path, require_pdftk):
    dest = tmp_path / "filled.pdf"
    fillpdf.fill({"field_1": "Smile ☺"}, form_pdf, dest, Options(flatten=False, use_xfdf=True))
    assert _field_values(dest)["field_1"] == "Smile ☺"


def test_fill_flatten_returns_pdf_bytes(form_pdf, require_pdftk):
    data = fillpdf.fill({"field_1": "Hello"}, form_pdf)
    assert data.startswith(b"%PDF-")


def test_fill_refuses_existing_destination(form_pdf, tmp_path, require_pdftk):
    dest = tmp_path / "filled.pdf"
    dest.write_bytes(b"keep me")

    with pytest.raises(fillpdf.DestinationExistsError):
        fillpdf.fill({"field_1": "Hello"}, form_pdf, dest)
    assert dest.read_bytes() == b"keep me"


def test_get_metadata(form_pdf, require_pdftk):
    info = fillpdf.get_metadata(form_pdf)
    assert info["Title"] == "Sample form"
    assert info["Author"] == "fillpdf tests"
