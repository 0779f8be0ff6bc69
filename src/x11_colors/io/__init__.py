"""Loading color tables."""

from x11_colors.io.reader import load_catalog, parse_rgb_txt

__all__ = ["load_catalog", "parse_rgb_txt"]
