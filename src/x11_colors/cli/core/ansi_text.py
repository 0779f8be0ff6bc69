"""ANSI text utilities - measuring strings in terminal cells."""

from __future__ import annotations

import re

from rich.cells import cell_len, get_character_cell_size

# Pattern to match ANSI escape sequences (including ~ terminator for F-keys, etc.)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')


def strip_ansi(s: str) -> str:
    """Remove ANSI escape sequences."""
    return _ANSI_ESCAPE.sub('', s)


def visible_width(s: str) -> int:
    """
    Number of terminal cells the string occupies.

    Escape sequences take no space, wide glyphs take two cells and
    combining marks take none.
    """
    return cell_len(strip_ansi(s))


def char_width(ch: str) -> int:
    """Cell width of a single character (0, 1 or 2)."""
    return get_character_cell_size(ch)
