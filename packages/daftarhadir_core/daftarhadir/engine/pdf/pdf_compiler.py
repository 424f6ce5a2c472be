"""

PDFCompiler - draws a LayoutPage onto a ReportLab canvas
---------------------------------------------------------
Layout blocks are positioned in millimetres from the top-left corner of
the page; ReportLab works in points from the bottom-left corner. All
conversion between the two happens here.

"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import BinaryIO, Optional, Union

from reportlab.lib.colors import black
from reportlab.pdfgen import canvas

from ...exceptions import RenderingError
from ...version import __version__
from ..geometry import mm_to_points
from ..unified_layout import BLOCK_RECT, BLOCK_TEXT, LayoutBlock, LayoutPage
from .render_utils import optional_color

logger = logging.getLogger(__name__)

PRODUCER = f"daftarhadir {__version__}"


class PDFCompiler:
    """Compile a single laid out sheet into a PDF document."""

    def __init__(self, output: Union[str, Path, BinaryIO], title: Optional[str] = None,
                 author: Optional[str] = None):
        """Initialize PDF compiler.

        Args:
            output: Output file path or writable binary stream
            title: Optional document title stored in the PDF metadata
            author: Optional document author stored in the PDF metadata
        """
        self.output = output
        self.title = title
        self.author = author
        self._page_height = 0.0

    def compile(self, page: LayoutPage) -> Union[Path, BinaryIO]:
        """Draw ``page`` and save the document.

        Args:
            page: Laid out sheet

        Returns:
            Path of the written file, or the stream that was written to

        Raises:
            RenderingError: If the PDF cannot be written
        """
        width = mm_to_points(page.size.width)
        height = mm_to_points(page.size.height)
        self._page_height = height

        target = str(self.output) if isinstance(self.output, (str, Path)) else self.output
        c = canvas.Canvas(target, pagesize=(width, height), pageCompression=1)
        c.setCreator("daftarhadir")
        c.setProducer(PRODUCER)
        if self.title:
            c.setTitle(self.title)
        if self.author:
            c.setAuthor(self.author)

        c.setStrokeColor(black)
        for block in page.blocks:
            if block.block_type == BLOCK_RECT:
                self._draw_rect(c, block)
            elif block.block_type == BLOCK_TEXT:
                self._draw_text(c, block)
            else:
                logger.warning("Skipping unknown block type %r", block.block_type)

        c.showPage()
        try:
            c.save()
        except OSError as e:
            logger.error(f"Failed to write PDF file to {self.output}: {e}")
            raise RenderingError(
                f"Failed to write PDF file: {e}", output_path=str(self.output), cause=e
            ) from e

        logger.debug("Compiled %d blocks to %s", len(page.blocks), self.output)
        if isinstance(self.output, (str, Path)):
            return Path(self.output)
        return self.output

    def _y(self, y_mm: float) -> float:
        return self._page_height - mm_to_points(y_mm)

    def _draw_rect(self, c: canvas.Canvas, block: LayoutBlock) -> None:
        frame = block.frame
        style = block.style or {}
        fill = optional_color(style.get("fill_color"))

        c.setLineWidth(mm_to_points(style.get("line_width", 0.2)))
        if fill is not None:
            c.setFillColor(fill)
        c.rect(
            mm_to_points(frame.x),
            self._y(frame.bottom),
            mm_to_points(frame.width),
            mm_to_points(frame.height),
            stroke=1,
            fill=1 if fill is not None else 0,
        )

    def _draw_text(self, c: canvas.Canvas, block: LayoutBlock) -> None:
        text = block.content
        if not text:
            return
        style = block.style or {}
        font_name = style.get("font_name", "Helvetica")
        font_size = float(style.get("font_size", 10.0))
        angle = float(style.get("angle") or 0.0)
        x = mm_to_points(block.frame.x)
        y = self._y(block.frame.y)

        c.saveState()
        try:
            c.setFillColor(black)
            c.setFont(font_name, font_size)
            if angle:
                # Counter-clockwise about the anchor, as one cm operator.
                radians = math.radians(angle)
                cos, sin = round(math.cos(radians), 10), round(math.sin(radians), 10)
                c.transform(cos, sin, -sin, cos, x, y)
                x, y = 0.0, 0.0
            if style.get("align") == "center":
                c.drawCentredString(x, y, text)
            elif style.get("align") == "right":
                c.drawRightString(x, y, text)
            else:
                c.drawString(x, y, text)
        finally:
            c.restoreState()
