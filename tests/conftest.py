"""Shared fixtures for color listing tests."""

import io

import pytest

from x11_colors.core.catalog import ColorCatalog
from x11_colors.io.reader import load_catalog


class FakeTTY(io.StringIO):
    """In-memory stream that claims to be a terminal."""

    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return 99


@pytest.fixture
def rgb_catalog() -> ColorCatalog:
    """Three colors whose names differ in case."""
    return ColorCatalog.from_mapping({
        "Red": (255, 0, 0),
        "blue": (0, 0, 255),
        "Green": (0, 128, 0),
    })


@pytest.fixture(scope="session")
def x11_catalog() -> ColorCatalog:
    """The bundled X11 table."""
    return load_catalog()


@pytest.fixture
def tty_stream() -> FakeTTY:
    return FakeTTY()
