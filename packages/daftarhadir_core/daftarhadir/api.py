"""

Simple high-level API for daftarhadir.

Usage example:
>>> from datetime import date
>>> from daftarhadir import AttendanceRequest, DateRange, render_attendance_sheet
>>>
>>> request = AttendanceRequest(
...     kategori_tlh="Administrasi",
...     unit="Bagian Pengembangan Produk TI",
...     direktorat="Direktorat Pusat Teknologi Informasi",
...     periode="Januari 2024",
...     nama="Budi Santoso",
...     date_range=DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31)),
...     holidays={date(2024, 1, 1)},
...     date_sign=date(2024, 1, 31),
... )
>>> render_attendance_sheet(request, output_dir="out")
PosixPath('out/DH Budi Santoso.pdf')

"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import SheetConfig
from .engine.layout_engine import SheetLayoutEngine
from .engine.pdf import PDFCompiler
from .engine.unified_layout import LayoutPage
from .models import AttendanceRequest

logger = logging.getLogger(__name__)

__all__ = [
    "build_layout",
    "build_pdf_bytes",
    "generate_pdf",
    "output_filename",
    "render_attendance_sheet",
]

RequestLike = Union[AttendanceRequest, Dict[str, Any]]


def _as_request(request: RequestLike) -> AttendanceRequest:
    if isinstance(request, AttendanceRequest):
        return request
    return AttendanceRequest.from_dict(request)


def output_filename(nama: str) -> str:
    """File name of the sheet for employee ``nama``: ``DH <nama>.pdf``."""
    safe_name = nama.replace("/", "-").replace("\\", "-")
    return f"DH {safe_name}.pdf"


def build_layout(request: RequestLike, config: Optional[SheetConfig] = None) -> Optional[LayoutPage]:
    """Lay out the sheet without drawing it.

    Returns:
        LayoutPage, or None when the date range is incomplete
    """
    return SheetLayoutEngine(config).layout(_as_request(request))


def render_attendance_sheet(
    request: RequestLike,
    output_dir: Union[str, Path, None] = None,
    config: Optional[SheetConfig] = None,
) -> Optional[Path]:
    """Render the attendance sheet PDF for ``request``.

    Nothing is written when either end of the date range is missing.

    Args:
        request: AttendanceRequest or form payload dictionary
        output_dir: Directory to write into (default: current directory)
        config: Sheet configuration (default texts when omitted)

    Returns:
        Path of the written PDF, or None when nothing was rendered

    Raises:
        ValidationError: If a payload dictionary holds unparseable dates
        RenderingError: If the PDF cannot be written
    """
    request = _as_request(request)
    config = config or SheetConfig()
    page = SheetLayoutEngine(config).layout(request)
    if page is None:
        logger.debug("Skipping sheet for %r: date range incomplete", request.nama)
        return None

    directory = Path(output_dir) if output_dir is not None else Path.cwd()
    output_path = directory / output_filename(request.nama)

    compiler = PDFCompiler(output_path, title=config.title, author=config.institution)
    result = compiler.compile(page)
    logger.info("Attendance sheet written to %s", result)
    return result


def build_pdf_bytes(request: RequestLike, config: Optional[SheetConfig] = None) -> Optional[bytes]:
    """Render the sheet in memory, e.g. for an HTTP download response.

    Returns:
        PDF document bytes, or None when the date range is incomplete
    """
    request = _as_request(request)
    config = config or SheetConfig()
    page = SheetLayoutEngine(config).layout(request)
    if page is None:
        return None

    buffer = io.BytesIO()
    PDFCompiler(buffer, title=config.title, author=config.institution).compile(page)
    return buffer.getvalue()


async def generate_pdf(
    request: RequestLike,
    output_dir: Union[str, Path, None] = None,
    config: Optional[SheetConfig] = None,
) -> Optional[Path]:
    """Async form of ``render_attendance_sheet``; rendering itself is synchronous."""
    return render_attendance_sheet(request, output_dir=output_dir, config=config)
