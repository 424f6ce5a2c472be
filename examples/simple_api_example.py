#!/usr/bin/env python3
"""
Example use of the high-level API.

Renders a January 2024 attendance sheet from a form payload.
"""

from pathlib import Path

from daftarhadir import AttendanceRequest, build_layout, render_attendance_sheet


FORM_PAYLOAD = {
    "kategoriTLH": "Administrasi",
    "unit": "Bagian Pengembangan Produk TI",
    "direktorat": "Direktorat Pusat Teknologi Informasi",
    "periode": "Januari 2024",
    "nama": "Muhammad Rizky Pratama Putra",
    "dateRange": {"from": "2024-01-01", "to": "2024-01-31"},
    "holidays": ["2024-01-01"],
    "dateSign": "2024-01-31",
}


def main():
    """Render the example sheet into ./output."""
    request = AttendanceRequest.from_dict(FORM_PAYLOAD)

    page = build_layout(request)
    print(f"Blocks on the sheet: {len(page.blocks)}")

    pdf_path = render_attendance_sheet(request, output_dir="output")
    print(f"PDF saved: {pdf_path}")


if __name__ == "__main__":
    Path("output").mkdir(exist_ok=True)
    main()
