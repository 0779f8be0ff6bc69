"""Single-row drawing surface for styled text segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from x11_colors.cli.core.ansi_text import char_width, visible_width
from x11_colors.core.cell import Cell
from x11_colors.core.color import RGB
from x11_colors.core.constants import CSI, RESET


@dataclass(frozen=True)
class Segment:
    """A run of text drawn with one foreground color."""
    text: str
    fg: Optional[RGB] = None


@dataclass(frozen=True)
class PrintResult:
    """Where the cursor ended up after printing a segment."""
    col: int
    overflow: bool = False


class Window:
    """
    A frame one row high and width cells wide.

    Segments are placed at explicit column offsets and never wrap; text
    past the right edge is dropped and reported as overflow. ``render``
    turns the frame into SGR-styled text for the terminal.
    """

    def __init__(self, width: int):
        self.width = max(width, 0)
        self._cells: list[Cell] = []
        self.clear()

    def clear(self) -> None:
        """Blank every cell."""
        self._cells = [Cell() for _ in range(self.width)]

    @staticmethod
    def gwidth(text: str) -> int:
        """Number of cells text occupies."""
        return visible_width(text)

    def print_segment(self, segment: Segment, col_offset: int = 0) -> PrintResult:
        """Draw segment starting at col_offset."""
        col = col_offset
        last: Optional[Cell] = None
        if 0 < col <= self.width:
            head = col - 1
            while head > 0 and self._cells[head].wide_tail:
                head -= 1
            last = self._cells[head]

        for ch in segment.text:
            w = char_width(ch)
            if w == 0:
                # Combining marks join the glyph before them
                if last is not None:
                    last.char += ch
                continue
            if col + w > self.width:
                return PrintResult(col, overflow=True)

            last = Cell(ch, segment.fg)
            self._cells[col] = last
            for tail in range(col + 1, col + w):
                self._cells[tail] = Cell('', segment.fg, wide_tail=True)
            col += w

        return PrintResult(col)

    def render(self) -> str:
        """Serialize the frame, trimming trailing blank cells."""
        end = len(self._cells)
        while end > 0 and self._cells[end - 1].is_default():
            end -= 1

        parts: list[str] = []
        fg: Optional[RGB] = None
        for cell in self._cells[:end]:
            if cell.wide_tail:
                continue
            if cell.fg != fg:
                parts.append(f"{CSI}{cell.fg.to_sgr_fg()}m" if cell.fg else f"{CSI}39m")
                fg = cell.fg
            parts.append(cell.char)

        if fg is not None:
            parts.append(RESET)

        return ''.join(parts)
