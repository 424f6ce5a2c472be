"""
daftarhadir - attendance sheets for daily casual workers (TLH).

Renders the "Daftar Hadir Tenaga Lepas Harian" sheet as a single landscape
legal-size PDF page: title, metadata block, one grid column per day of the
requested range with weekends and holidays shaded, and the signature block.

Quick Start:
    from daftarhadir import AttendanceRequest, render_attendance_sheet

    request = AttendanceRequest.from_dict(form_payload)
    render_attendance_sheet(request, output_dir="out")
"""

from .version import __version__, __version_info__

from .exceptions import (
    DaftarHadirError,
    ValidationError,
    ConfigurationError,
    RenderingError,
)
from .models import AttendanceRequest, DateRange
from .config import SheetConfig, SignatureRole, load_config
from .api import (
    build_layout,
    build_pdf_bytes,
    generate_pdf,
    output_filename,
    render_attendance_sheet,
)

__all__ = [
    "__version__",
    "__version_info__",

    # API
    "render_attendance_sheet",
    "build_pdf_bytes",
    "build_layout",
    "generate_pdf",
    "output_filename",

    # Models and configuration
    "AttendanceRequest",
    "DateRange",
    "SheetConfig",
    "SignatureRole",
    "load_config",

    # Exceptions
    "DaftarHadirError",
    "ValidationError",
    "ConfigurationError",
    "RenderingError",
]


def main():
    """CLI entry point."""
    from .cli import main as cli_main
    return cli_main()
