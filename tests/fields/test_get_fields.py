import pytest

from fillpdf.core.types import FieldDescriptor
from fillpdf.exceptions import NotFoundError, ToolInvocationError, ToolNotInstalled
from fillpdf.fields import get_fields as get_fields_module
from fillpdf.fields.get_fields import get_fields


@pytest.fixture
def fake_pdftk(mocker):
    mocker.patch.object(get_fields_module, "require_tool", return_value="/usr/bin/pdftk")
    return mocker.patch.object(get_fields_module, "run_tool")


def test_get_fields_runs_dump_and_parses(source_pdf, fake_pdftk):
    fake_pdftk.return_value = (
        b"---\nFieldType: Text\nFieldName: field_1\nFieldFlags: 0\n"
        b"---\nFieldType: Button\nFieldName: box\nFieldNameAlt: Tick me\nFieldFlags: 0\n"
    )

    fields = get_fields(source_pdf, timeout=5)

    assert fields == [
        FieldDescriptor(type="text", name="field_1", flags="0"),
        FieldDescriptor(type="button", name="box", alt_name="Tick me", flags="0"),
    ]
    fake_pdftk.assert_called_once_with(
        "/usr/bin/pdftk", [source_pdf, "dump_data_fields_utf8"], timeout=5
    )


def test_get_fields_utf8_names(source_pdf, fake_pdftk):
    fake_pdftk.return_value = "FieldType: Text\nFieldName: Größe\nFieldFlags: 0\n".encode()
    assert get_fields(source_pdf)[0].name == "Größe"


def test_get_fields_missing_source(tmp_path, fake_pdftk):
    with pytest.raises(NotFoundError):
        get_fields(tmp_path / "missing.pdf")
    fake_pdftk.assert_not_called()


def test_get_fields_tool_not_installed(source_pdf, mocker):
    mocker.patch("fillpdf.utils.process.shutil.which", return_value=None)
    run = mocker.patch.object(get_fields_module, "run_tool")

    with pytest.raises(ToolNotInstalled):
        get_fields(source_pdf)
    run.assert_not_called()


def test_get_fields_tool_failure_is_not_a_parse_error(source_pdf, fake_pdftk):
    fake_pdftk.side_effect = ToolInvocationError("pdftk", 1, "Error: Unable to find file.")

    with pytest.raises(ToolInvocationError) as exc:
        get_fields(source_pdf)
    assert "Unable to find file" in exc.value.stderr
