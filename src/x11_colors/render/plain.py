"""Render the catalog as plain ``name = #rrggbb`` lines."""

from typing import Iterable, TextIO

from x11_colors.core.catalog import ColorCatalog
from x11_colors.core.color import ColorEntry


def format_plain(entry: ColorEntry) -> str:
    return f"{entry.name} = #{entry.rgb.hex}\n"


def print_plain(catalog: ColorCatalog, names: Iterable[str], stream: TextIO) -> int:
    """Write one unstyled line per name, friendly to Unix tooling."""
    for entry in catalog.entries(names):
        stream.write(format_plain(entry))
    stream.flush()
    return 0
