"""Name wrapping for the narrow ``Nama`` cell."""

from __future__ import annotations

import re
from typing import List

DEFAULT_WRAP_WIDTH = 20


def _chunk_pattern(width: int) -> "re.Pattern[str]":
    # Up to `width` characters ending at whitespace or end of text, otherwise
    # a whole run of non-space characters.
    return re.compile(r".{1,%d}(?=\s|$)|\S+" % width)


def split_name_lines(name: str, width: int = DEFAULT_WRAP_WIDTH) -> List[str]:
    """Split ``name`` into lines of at most ``width`` characters.

    Names no longer than ``width`` come back unchanged as a single line.
    Longer names are broken at whitespace and each line is stripped. A word
    longer than ``width`` is kept whole on its own line.

    Args:
        name: Employee name
        width: Maximum characters per line

    Returns:
        List of lines, never empty
    """
    if len(name) <= width:
        return [name]

    lines = [chunk.strip() for chunk in _chunk_pattern(width).findall(name)]
    lines = [line for line in lines if line]
    return lines or [name.strip()]
