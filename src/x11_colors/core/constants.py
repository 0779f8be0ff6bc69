"""Shared constants for color listing output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# DEC private mode 2027: grapheme cluster width handling
UNICODE_SET = f"{CSI}?2027h"
UNICODE_RESET = f"{CSI}?2027l"

FULL_BLOCK = "█"
SWATCH = FULL_BLOCK * 2

# Rendered width of " = #rrggbb ██"
SUFFIX_WIDTH = 13
SEPARATOR = " "

# Used where the platform cannot report a window size
DEFAULT_ROWS = 24
DEFAULT_COLS = 120
DEFAULT_PIXEL_WIDTH = 1024
DEFAULT_PIXEL_HEIGHT = 768
