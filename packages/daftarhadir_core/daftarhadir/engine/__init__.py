"""Layout and rendering engine for attendance sheets."""

from .calendar_grid import GridDay, build_grid_days, days_in_range, is_weekend
from .layout_engine import SheetLayoutEngine
from .text_wrap import split_name_lines
from .unified_layout import LayoutBlock, LayoutPage

__all__ = [
    "GridDay",
    "build_grid_days",
    "days_in_range",
    "is_weekend",
    "SheetLayoutEngine",
    "split_name_lines",
    "LayoutBlock",
    "LayoutPage",
]
