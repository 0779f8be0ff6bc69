"""Core terminal infrastructure - terminal I/O, drawing, layout."""

from x11_colors.cli.core.terminal import Terminal, TerminalSize
from x11_colors.cli.core.window import PrintResult, Segment, Window
from x11_colors.cli.core.layout import (
    LayoutPlan,
    cell_for_index,
    column_count,
    index_for_cell,
    plan_layout,
)

__all__ = [
    "Terminal",
    "TerminalSize",
    "PrintResult",
    "Segment",
    "Window",
    "LayoutPlan",
    "cell_for_index",
    "column_count",
    "index_for_cell",
    "plan_layout",
]
