"""Geometry primitives and helpers for sheet layout calculations.

Layout coordinates are millimetres measured from the top-left corner of the
page, the way the sheet is drawn up on paper. Conversion to PDF points with
a bottom-left origin happens only in the compiler.
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import landscape, legal
from reportlab.lib.units import mm


@dataclass(slots=True)
class Size:
    width: float
    height: float


@dataclass(slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        """Ensure non-negative dimensions."""
        if self.width < 0:
            self.width = abs(self.width)
        if self.height < 0:
            self.height = abs(self.height)

    @property
    def bottom(self) -> float:
        return self.y + self.height


def mm_to_points(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) * mm


def points_to_mm(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) / mm


def legal_landscape_mm() -> Size:
    """Legal paper in landscape orientation, in millimetres (355.6 x 215.9)."""
    width, height = landscape(legal)
    return Size(round(points_to_mm(width), 1), round(points_to_mm(height), 1))
