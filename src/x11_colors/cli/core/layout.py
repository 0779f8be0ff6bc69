"""Grid layout for color listings.

Entries fill the grid column-major: down the first column, then the next.
Every cell is the same width so swatches line up:

    name          = #rrggbb ██ name          = #rrggbb ██
    |<- label ->|<-- suffix -->|
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from x11_colors.core.constants import SUFFIX_WIDTH


@dataclass(frozen=True)
class LayoutPlan:
    """Computed grid dimensions for one draw."""
    columns: int
    rows: int
    item_width: int
    longest_label_width: int

    @property
    def capacity(self) -> int:
        """Number of cells in the grid."""
        return self.columns * self.rows


def column_count(cols: int, item_width: int) -> int:
    """
    How many items of item_width fit side by side in cols terminal columns.

    Each item is assumed to be one cell wider to account for the separator,
    then a column is given back when the one leftover cell is exactly the
    separator the last column does not need. Never less than 1: an item
    wider than the terminal gets a single, overflowing column.
    """
    columns = cols // (item_width + 1)
    if item_width > 0 and cols % item_width == 1:
        columns += 1
    return max(columns, 1)


def plan_layout(
    names: Sequence[str],
    measure: Callable[[str], int],
    cols: int,
) -> LayoutPlan:
    """
    Plan the grid for names in a terminal cols columns wide.

    Args:
        names: Sorted color names
        measure: Returns the number of terminal cells a string occupies
        cols: Terminal width in columns

    Returns:
        LayoutPlan with rows == 0 when there is nothing to show
    """
    longest = max((measure(name) for name in names), default=0)
    item_width = longest + SUFFIX_WIDTH
    columns = column_count(cols, item_width)
    rows = math.ceil(len(names) / columns)

    return LayoutPlan(
        columns=columns,
        rows=rows,
        item_width=item_width,
        longest_label_width=longest,
    )


def cell_for_index(index: int, rows: int) -> tuple[int, int]:
    """(row, col) of the index-th entry."""
    return index % rows, index // rows


def index_for_cell(row: int, col: int, rows: int) -> int:
    """Entry index shown at (row, col); may be past the end in the last column."""
    return row + col * rows
