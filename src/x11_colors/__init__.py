"""
x11-colors: list the X11 named colors in the terminal

Quick Start:
    >>> import x11_colors
    >>> catalog = x11_colors.load_catalog()
    >>> catalog.get("DodgerBlue").hex
    '1e90ff'

Features:
    - Bundled X11 rgb.txt color table, case-insensitive lookup
    - Plain "name = #rrggbb" listing for Unix tooling
    - Terminal-width grid of true-color swatches
"""

__version__ = "0.1.0"

# Core types
from x11_colors.core.catalog import CatalogError, ColorCatalog
from x11_colors.core.color import ColorEntry, RGB
from x11_colors.core.sorting import sort_names

# I/O
from x11_colors.io.reader import load_catalog

__all__ = [
    # Version
    "__version__",
    # Core types
    "CatalogError",
    "ColorCatalog",
    "ColorEntry",
    "RGB",
    "sort_names",
    # I/O
    "load_catalog",
]
