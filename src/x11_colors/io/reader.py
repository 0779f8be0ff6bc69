"""Load X11 ``rgb.txt`` color tables."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Optional

from x11_colors.core.catalog import CatalogError, ColorCatalog
from x11_colors.core.color import RGB

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "!"


def bundled_rgb_txt() -> str:
    """Contents of the rgb.txt shipped with the package."""
    return (resources.files("x11_colors") / "data" / "rgb.txt").read_text(encoding="utf-8")


def load_catalog(path: Optional[str | Path] = None) -> ColorCatalog:
    """
    Load a color catalog from an rgb.txt file.

    With no path, the bundled X11 table is used.
    """
    if path is None:
        text = bundled_rgb_txt()
        source = "<bundled rgb.txt>"
    else:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CatalogError(f"{path}: {e}") from e
        source = str(path)

    catalog = parse_rgb_txt(text)
    logger.debug("Loaded %d colors from %s", len(catalog), source)
    return catalog


def parse_rgb_txt(text: str) -> ColorCatalog:
    """
    Parse rgb.txt content.

    Each entry line is three decimal channels followed by the color name,
    which runs to the end of the line and may contain spaces. Blank lines
    and lines starting with ``!`` are skipped.
    """
    entries: list[tuple[str, RGB]] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        parts = stripped.split(None, 3)
        if len(parts) < 4:
            raise CatalogError(f"line {lineno}: expected 'R G B name', got {line!r}")

        try:
            rgb = RGB(int(parts[0]), int(parts[1]), int(parts[2]))
        except ValueError as e:
            raise CatalogError(f"line {lineno}: {e}") from e

        entries.append((parts[3].strip(), rgb))

    return ColorCatalog(entries)
