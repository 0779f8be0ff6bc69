"""Cell - atomic unit of a rendered row."""

from dataclasses import dataclass
from typing import Optional

from x11_colors.core.color import RGB


@dataclass(slots=True)
class Cell:
    """
    A single terminal cell with its foreground color.

    A wide glyph occupies its own cell plus a following ``wide_tail``
    cell that holds no text of its own.
    """
    char: str = ' '
    fg: Optional[RGB] = None  # None = terminal default
    wide_tail: bool = False

    def is_default(self) -> bool:
        """Check if this cell is an unstyled blank."""
        return self.char == ' ' and self.fg is None and not self.wide_tail
