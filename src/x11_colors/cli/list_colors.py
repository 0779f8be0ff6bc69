"""The ``list-colors`` command: choose an output mode and run it."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TextIO

from x11_colors.cli.core.terminal import Terminal
from x11_colors.core.catalog import ColorCatalog
from x11_colors.core.sorting import sort_names
from x11_colors.render.grid import pretty_print
from x11_colors.render.plain import print_plain

logger = logging.getLogger(__name__)


class OutputMode(Enum):
    """How the listing is written."""
    GRID = "grid"
    PLAIN = "plain"


def select_mode(plain: bool, stream: TextIO) -> OutputMode:
    """Grid only when asked for, on a terminal that can draw it."""
    if not plain and Terminal.is_interactive(stream) and Terminal.can_pretty_print():
        return OutputMode.GRID
    return OutputMode.PLAIN


def list_colors(catalog: ColorCatalog, plain: bool, stream: TextIO) -> int:
    """
    List every color in the catalog, sorted by name ignoring case.

    Returns the exit status. Errors while drawing propagate; there is no
    fallback from the grid to plain output.
    """
    names = sort_names(catalog.keys())
    mode = select_mode(plain, stream)
    logger.debug("Listing %d colors in %s mode", len(names), mode.value)

    if mode is OutputMode.GRID:
        return pretty_print(catalog, names, stream)
    return print_plain(catalog, names, stream)
