"""Tests for the high-level rendering API."""

import asyncio
from datetime import date

import pytest
from PyPDF2 import PdfReader

from daftarhadir import (
    DateRange,
    ValidationError,
    build_layout,
    build_pdf_bytes,
    generate_pdf,
    output_filename,
    render_attendance_sheet,
)


@pytest.mark.unit
class TestOutputFilename:

    def test_uses_employee_name(self):
        assert output_filename("Budi Santoso") == "DH Budi Santoso.pdf"

    def test_empty_name(self):
        assert output_filename("") == "DH .pdf"

    def test_path_separators_replaced(self):
        assert output_filename("A/B\\C") == "DH A-B-C.pdf"


@pytest.mark.integration
class TestRenderAttendanceSheet:
    """File output of the renderer."""

    def test_writes_named_file(self, temp_dir, sample_request):
        result = render_attendance_sheet(sample_request, output_dir=temp_dir)

        assert result == temp_dir / "DH Budi Santoso.pdf"
        assert result.exists()
        assert len(PdfReader(str(result)).pages) == 1

    def test_accepts_form_payload(self, temp_dir, sample_payload):
        result = render_attendance_sheet(sample_payload, output_dir=temp_dir)

        assert result.name == "DH Budi Santoso.pdf"

    def test_default_output_dir_is_cwd(self, temp_dir, sample_request, monkeypatch):
        monkeypatch.chdir(temp_dir)

        result = render_attendance_sheet(sample_request)

        assert result.parent == temp_dir
        assert (temp_dir / "DH Budi Santoso.pdf").exists()

    @pytest.mark.parametrize("date_range", [
        DateRange(start=None, end=date(2024, 1, 14)),
        DateRange(start=date(2024, 1, 1), end=None),
        DateRange(),
    ])
    def test_missing_date_produces_no_output(self, temp_dir, sample_request, date_range):
        """An incomplete range is a silent no-op."""
        sample_request.date_range = date_range

        assert render_attendance_sheet(sample_request, output_dir=temp_dir) is None
        assert list(temp_dir.iterdir()) == []

    def test_missing_date_in_payload(self, temp_dir, sample_payload):
        sample_payload["dateRange"] = {"from": "2024-01-01", "to": None}

        assert render_attendance_sheet(sample_payload, output_dir=temp_dir) is None
        assert list(temp_dir.iterdir()) == []

    def test_invalid_payload_date_raises(self, temp_dir, sample_payload):
        sample_payload["dateRange"] = {"from": "yesterday", "to": "2024-01-14"}

        with pytest.raises(ValidationError):
            render_attendance_sheet(sample_payload, output_dir=temp_dir)

    def test_overwrites_existing_file(self, temp_dir, sample_request):
        target = temp_dir / "DH Budi Santoso.pdf"
        target.write_bytes(b"old")

        render_attendance_sheet(sample_request, output_dir=temp_dir)

        assert target.read_bytes().startswith(b"%PDF")


@pytest.mark.integration
class TestInMemoryRendering:

    def test_build_pdf_bytes(self, sample_request):
        data = build_pdf_bytes(sample_request)

        assert data.startswith(b"%PDF")

    def test_build_pdf_bytes_incomplete_range(self, sample_request):
        sample_request.date_range = DateRange(start=date(2024, 1, 1))

        assert build_pdf_bytes(sample_request) is None

    def test_build_layout(self, sample_payload):
        page = build_layout(sample_payload)

        assert page is not None
        assert "Budi Santoso" in list(page.texts())


@pytest.mark.integration
def test_generate_pdf_async(temp_dir, sample_request):
    """The async wrapper renders the same file."""
    result = asyncio.run(generate_pdf(sample_request, output_dir=temp_dir))

    assert result == temp_dir / "DH Budi Santoso.pdf"
    assert result.exists()


@pytest.mark.integration
def test_generate_pdf_async_no_op(temp_dir, sample_request):
    sample_request.date_range = DateRange()

    assert asyncio.run(generate_pdf(sample_request, output_dir=temp_dir)) is None
