"""Color helpers shared by the PDF compiler."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from reportlab.lib import colors
from reportlab.lib.colors import Color, HexColor


def to_color(value: Union[Color, str, Sequence[float], None],
             fallback: str = "#000000") -> Color:
    """Convert an RGB tuple (0-255 or 0-1), hex string or Color to a ReportLab Color."""
    if isinstance(value, Color):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 3:
        r, g, b = (float(v) for v in value)
        if max(r, g, b) > 1.0:
            r, g, b = r / 255.0, g / 255.0, b / 255.0
        return Color(r, g, b)

    token = str(value or "").strip()
    if not token:
        return HexColor(fallback)
    if not token.startswith("#"):
        named = getattr(colors, token.lower(), None)
        if isinstance(named, Color):
            return named
        token = f"#{token}"
    try:
        return HexColor(token)
    except ValueError:
        return HexColor(fallback)


def optional_color(value) -> Optional[Color]:
    return None if value is None else to_color(value)
