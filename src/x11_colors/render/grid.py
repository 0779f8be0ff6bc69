"""Render the catalog as a grid of labelled color swatches."""

from __future__ import annotations

import logging
from typing import Sequence, TextIO

from x11_colors.cli.core.layout import LayoutPlan, index_for_cell, plan_layout
from x11_colors.cli.core.terminal import Terminal
from x11_colors.cli.core.window import PrintResult, Segment, Window
from x11_colors.core.catalog import ColorCatalog
from x11_colors.core.color import RGB
from x11_colors.core.constants import SEPARATOR, SWATCH

logger = logging.getLogger(__name__)


def swatch_suffix(rgb: RGB) -> str:
    """The ``" = #rrggbb ██"`` text drawn after each name."""
    return f" = #{rgb.hex} {SWATCH}"


class GridRenderer:
    """
    Draw sorted names into a column-major grid, one frame per row.

    Names are left-aligned; each suffix starts at the same offset within
    its column so the swatches line up.
    """

    def __init__(self, window: Window, sink: TextIO, newline: str = "\r\n"):
        self.window = window
        self.sink = sink
        self.newline = newline

    def render(self, catalog: ColorCatalog, names: Sequence[str], plan: LayoutPlan) -> int:
        """Draw every row and flush. Returns the number of rows written."""
        win = self.window
        count = len(names)

        for row in range(plan.rows):
            win.clear()
            result = PrintResult(0)
            for col in range(plan.columns):
                idx = index_for_cell(row, col, plan.rows)
                if idx >= count:
                    continue

                name = names[idx]
                rgb = catalog.get(name)

                if col > 0:
                    result = win.print_segment(Segment(SEPARATOR), result.col)
                result = win.print_segment(Segment(name), result.col)
                pad = plan.longest_label_width - win.gwidth(name)
                result = win.print_segment(Segment(swatch_suffix(rgb), rgb), result.col + pad)

            self.sink.write(win.render() + self.newline)

        self.sink.flush()
        return plan.rows


def pretty_print(catalog: ColorCatalog, names: Sequence[str], stream: TextIO) -> int:
    """Draw the grid on the terminal behind stream inside a terminal session."""
    with Terminal.session(stream) as size:
        window = Window(size.cols)
        plan = plan_layout(names, window.gwidth, size.cols)
        logger.debug(
            "Grid layout: %d columns x %d rows, item width %d",
            plan.columns, plan.rows, plan.item_width,
        )
        rows = GridRenderer(window, stream).render(catalog, names, plan)
    logger.debug("Rendered %d rows", rows)
    return 0
