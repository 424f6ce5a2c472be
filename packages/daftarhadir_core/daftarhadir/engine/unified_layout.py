"""
Unified layout model: the sheet as positioned blocks ready for drawing.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from .geometry import Rect, Size

BLOCK_TEXT = "text"
BLOCK_RECT = "rect"


@dataclass(slots=True)
class LayoutBlock:
    """A single text run or cell rectangle on the page.

    For text blocks ``frame.x``/``frame.y`` is the baseline anchor and
    ``content`` is the string; ``style`` carries font, size, alignment and
    rotation. For rect blocks ``frame`` is the cell and ``style`` carries the
    fill color (``None`` means stroke only).
    """
    frame: Rect
    block_type: str
    content: Any
    style: dict
    role: Optional[str] = None
    sequence: Optional[int] = None


@dataclass(slots=True)
class LayoutPage:
    """The single page of an attendance sheet."""
    number: int
    size: Size
    blocks: List[LayoutBlock] = field(default_factory=list)

    def add_block(self, block: LayoutBlock) -> None:
        block.sequence = len(self.blocks)
        self.blocks.append(block)

    def blocks_with_role(self, role: str) -> List[LayoutBlock]:
        return [block for block in self.blocks if block.role == role]

    def texts(self) -> Iterator[str]:
        for block in self.blocks:
            if block.block_type == BLOCK_TEXT:
                yield block.content
