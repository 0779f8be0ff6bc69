"""Core data structures for the named-color catalog."""

from x11_colors.core.catalog import CatalogError, ColorCatalog
from x11_colors.core.color import ColorEntry, RGB
from x11_colors.core.sorting import sort_names

__all__ = ["CatalogError", "ColorCatalog", "ColorEntry", "RGB", "sort_names"]
