import shutil

import pytest


@pytest.fixture
def source_pdf(tmp_path):
    """A placeholder input file; pdftk itself is mocked in unit tests."""
    path = tmp_path / "form.pdf"
    path.write_bytes(b"%PDF-1.4\n%%EOF\n")
    return path


@pytest.fixture
def form_pdf(tmp_path):
    """Creates a real PDF with two text fields and a checkbox."""
    pikepdf = pytest.importorskip("pikepdf")

    pdf = pikepdf.new()
    pdf.add_blank_page()
    pdf.Root.AcroForm = pikepdf.Dictionary(
        Fields=pikepdf.Array(),
        DA=pikepdf.String("/Helv 0 Tf 0 g"),
        NeedAppearances=True,
    )

    field_1 = pikepdf.Dictionary(
        Type=pikepdf.Name.Annot,
        Subtype=pikepdf.Name.Widget,
        FT=pikepdf.Name.Tx,
        T=pikepdf.String("field_1"),
        TU=pikepdf.String("First field"),
        Rect=[50, 700, 250, 720],
    )
    field_2 = pikepdf.Dictionary(
        Type=pikepdf.Name.Annot,
        Subtype=pikepdf.Name.Widget,
        FT=pikepdf.Name.Tx,
        T=pikepdf.String("field_2"),
        Rect=[50, 650, 250, 670],
    )
    checkbox = pikepdf.Dictionary(
        Type=pikepdf.Name.Annot,
        Subtype=pikepdf.Name.Widget,
        FT=pikepdf.Name.Btn,
        T=pikepdf.String("agree"),
        V=pikepdf.Name.Off,
        Rect=[50, 600, 70, 620],
    )

    pdf.pages[0].Annots = pdf.make_indirect([])
    for f in [field_1, field_2, checkbox]:
        ind = pdf.make_indirect(f)
        pdf.Root.AcroForm.Fields.append(ind)
        pdf.pages[0].Annots.append(ind)

    pdf.docinfo["/Title"] = "Sample form"
    pdf.docinfo["/Author"] = "fillpdf tests"

    path = tmp_path / "form.pdf"
    pdf.save(path)
    return path


@pytest.fixture
def require_pdftk():
    if shutil.which("pdftk") is None:
        pytest.skip("pdftk is not installed")


@pytest.fixture
def no_tool_env(monkeypatch):
    """Make sure tool overrides from the environment do not leak in."""
    monkeypatch.delenv("FILLPDF_PDFTK", raising=False)
    monkeypatch.delenv("FILLPDF_EXIFTOOL", raising=False)
