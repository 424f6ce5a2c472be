"""
Sheet layout engine.

Turns an ``AttendanceRequest`` into a ``LayoutPage``: every string and cell
of the sheet with its final position in millimetres (top-left origin). The
grid is not paginated; one column is laid out per day of the range no
matter how many there are.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..config import SheetConfig
from ..models import AttendanceRequest
from .calendar_grid import GridDay, build_grid_days, format_long_date
from .geometry import Rect, Size, legal_landscape_mm
from .text_wrap import split_name_lines
from .unified_layout import BLOCK_RECT, BLOCK_TEXT, LayoutBlock, LayoutPage

logger = logging.getLogger(__name__)

# Title and metadata block
TITLE_Y = 15.0
SUBTITLE_Y = 22.0
LABEL_X = 10.0
VALUE_X = 55.0
METADATA_START_Y = 35.0
METADATA_ROW_SPACING = 7.0

# Grid
GRID_TOP = 70.0
CELL_WIDTH = 11.0
CELL_HEIGHT = 22.0
NO_COLUMN_X = 10.0
NO_COLUMN_WIDTH = 10.0
NAME_COLUMN_X = 20.0
NAME_COLUMN_WIDTH = 40.0
DAY_COLUMNS_X = 60.0
HEADER_TEXT_OFFSET_Y = 12.0
DAY_LABEL_OFFSET_X = 7.0
DAY_LABEL_OFFSET_Y = 19.0
ROW_TEXT_OFFSET_Y = 7.0
NAME_TEXT_X = 22.0
NAME_LINE_SPACING = 5.0

# Signature block
SIGNATURE_OFFSET_Y = 40.0
SIGNATURE_TITLE_OFFSET_Y = 7.0
SIGNATURE_NAME_OFFSET_Y = 30.0

ROLE_TITLE = "title"
ROLE_METADATA = "metadata"
ROLE_HEADER = "header"
ROLE_DAY_HEADER = "day-header"
ROLE_DAY_LABEL = "day-label"
ROLE_ROW = "row"
ROLE_NAME_LINE = "name-line"
ROLE_DAY_CELL = "day-cell"
ROLE_SIGNATURE = "signature"


class SheetLayoutEngine:
    """Computes the positioned blocks of one attendance sheet."""

    def __init__(self, config: Optional[SheetConfig] = None):
        self.config = config or SheetConfig()
        self.page_size: Size = legal_landscape_mm()

    def layout(self, request: AttendanceRequest) -> Optional[LayoutPage]:
        """Lay out the sheet for ``request``.

        Args:
            request: Form data

        Returns:
            LayoutPage, or None when the date range is incomplete
        """
        date_range = request.date_range
        if not date_range.is_complete:
            logger.debug("Date range incomplete (%s - %s), nothing to lay out",
                         date_range.start, date_range.end)
            return None

        days = build_grid_days(date_range.start, date_range.end, request.holidays)
        page = LayoutPage(number=1, size=self.page_size)

        self._layout_title(page)
        self._layout_metadata(page, request)
        self._layout_header_row(page, days)
        row_top = GRID_TOP + CELL_HEIGHT
        self._layout_data_row(page, request, days, row_top)
        self._layout_signatures(page, request, row_top + SIGNATURE_OFFSET_Y)

        logger.debug("Laid out %d day columns, %d blocks", len(days), len(page.blocks))
        return page

    # -- helpers -------------------------------------------------------------

    def _text(self, page: LayoutPage, text: str, x: float, y: float, *, role: str,
              bold: bool = False, size: Optional[float] = None, align: str = "left",
              angle: float = 0.0) -> None:
        config = self.config
        style = {
            "font_name": config.bold_font_name if bold else config.font_name,
            "font_size": size or config.body_font_size,
            "align": align,
            "angle": angle,
        }
        page.add_block(LayoutBlock(
            frame=Rect(x=x, y=y, width=0.0, height=0.0),
            block_type=BLOCK_TEXT,
            content=text,
            style=style,
            role=role,
        ))

    def _rect(self, page: LayoutPage, x: float, y: float, width: float, height: float, *,
              role: str, fill: Optional[Tuple[int, int, int]] = None, content=None) -> None:
        page.add_block(LayoutBlock(
            frame=Rect(x=x, y=y, width=width, height=height),
            block_type=BLOCK_RECT,
            content=content,
            style={"fill_color": fill, "line_width": self.config.line_width_mm},
            role=role,
        ))

    # -- sections ------------------------------------------------------------

    def _layout_title(self, page: LayoutPage) -> None:
        center = page.size.width / 2
        size = self.config.title_font_size
        self._text(page, self.config.title, center, TITLE_Y,
                   role=ROLE_TITLE, bold=True, size=size, align="center")
        self._text(page, self.config.institution, center, SUBTITLE_Y,
                   role=ROLE_TITLE, bold=True, size=size, align="center")

    def _layout_metadata(self, page: LayoutPage, request: AttendanceRequest) -> None:
        rows = [
            ("Kategori TLH", request.kategori_tlh),
            ("Unit / Bagian", request.unit),
            ("Direktorat/Fakultas", request.direktorat),
            ("Periode", f"Bulan {request.periode}"),
        ]
        for index, (label, value) in enumerate(rows):
            y = METADATA_START_Y + index * METADATA_ROW_SPACING
            self._text(page, label, LABEL_X, y, role=ROLE_METADATA)
            self._text(page, f": {value}", VALUE_X, y, role=ROLE_METADATA)

    def _layout_header_row(self, page: LayoutPage, days: List[GridDay]) -> None:
        top = GRID_TOP
        self._rect(page, NO_COLUMN_X, top, NO_COLUMN_WIDTH, CELL_HEIGHT, role=ROLE_HEADER)
        self._rect(page, NAME_COLUMN_X, top, NAME_COLUMN_WIDTH, CELL_HEIGHT, role=ROLE_HEADER)
        self._text(page, "No", 13.0, top + HEADER_TEXT_OFFSET_Y, role=ROLE_HEADER, bold=True)
        self._text(page, "Nama", 35.0, top + HEADER_TEXT_OFFSET_Y, role=ROLE_HEADER, bold=True)

        for grid_day in days:
            x = DAY_COLUMNS_X + grid_day.index * CELL_WIDTH
            self._rect(page, x, top, CELL_WIDTH, CELL_HEIGHT,
                       role=ROLE_DAY_HEADER, content=grid_day)
            self._text(page, grid_day.label, x + DAY_LABEL_OFFSET_X, top + DAY_LABEL_OFFSET_Y,
                       role=ROLE_DAY_LABEL, bold=True, angle=90.0)

    def _layout_data_row(self, page: LayoutPage, request: AttendanceRequest,
                         days: List[GridDay], top: float) -> None:
        self._rect(page, NO_COLUMN_X, top, NO_COLUMN_WIDTH, CELL_HEIGHT, role=ROLE_ROW)
        self._text(page, "1", 14.0, top + ROW_TEXT_OFFSET_Y, role=ROLE_ROW)
        self._rect(page, NAME_COLUMN_X, top, NAME_COLUMN_WIDTH, CELL_HEIGHT, role=ROLE_ROW)

        lines = split_name_lines(request.nama, self.config.name_wrap_width)
        for index, line in enumerate(lines):
            self._text(page, line, NAME_TEXT_X,
                       top + ROW_TEXT_OFFSET_Y + index * NAME_LINE_SPACING,
                       role=ROLE_NAME_LINE)

        for grid_day in days:
            x = DAY_COLUMNS_X + grid_day.index * CELL_WIDTH
            fill = self.config.shade_color if grid_day.shaded else self.config.blank_color
            self._rect(page, x, top, CELL_WIDTH, CELL_HEIGHT,
                       role=ROLE_DAY_CELL, fill=fill, content=grid_day)

    def _layout_signatures(self, page: LayoutPage, request: AttendanceRequest, y: float) -> None:
        width = page.size.width
        config = self.config
        approver = config.signature("approver")
        payment = config.signature("payment")
        verification = config.signature("verification")
        preparer = config.signature("preparer")

        self._text(page, approver.heading, 27.0, y, role=ROLE_SIGNATURE)
        self._text(page, approver.title, 15.0, y + SIGNATURE_TITLE_OFFSET_Y, role=ROLE_SIGNATURE)

        self._text(page, payment.heading, width / 3 + 15, y, role=ROLE_SIGNATURE, align="center")
        self._text(page, verification.heading, width / 2 + 20, y, role=ROLE_SIGNATURE)

        place_and_date = f"{config.city}, {format_long_date(request.date_sign)}"
        self._text(page, place_and_date, width - 80, y - SIGNATURE_TITLE_OFFSET_Y,
                   role=ROLE_SIGNATURE)
        self._text(page, preparer.heading, width - 60, y, role=ROLE_SIGNATURE)
        self._text(page, preparer.title, width - 80, y + SIGNATURE_TITLE_OFFSET_Y,
                   role=ROLE_SIGNATURE)

        names_y = y + SIGNATURE_NAME_OFFSET_Y
        self._text(page, approver.name, 30.0, names_y, role=ROLE_SIGNATURE)
        self._text(page, preparer.name, width - 65, names_y, role=ROLE_SIGNATURE)

        # Payment and verification carry only headings on the default sheet.
        for signer, x, align in ((payment, width / 3 + 15, "center"),
                                 (verification, width / 2 + 20, "left")):
            if signer.title:
                self._text(page, signer.title, x, y + SIGNATURE_TITLE_OFFSET_Y,
                           role=ROLE_SIGNATURE, align=align)
            if signer.name:
                self._text(page, signer.name, x, names_y, role=ROLE_SIGNATURE, align=align)
