"""Renderers for color listings."""

from x11_colors.render.grid import GridRenderer, pretty_print
from x11_colors.render.plain import print_plain

__all__ = ["GridRenderer", "pretty_print", "print_plain"]
