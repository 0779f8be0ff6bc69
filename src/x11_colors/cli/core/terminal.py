"""Low-level terminal operations - platform-independent abstraction."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO

from x11_colors.core.constants import (
    DEFAULT_COLS,
    DEFAULT_PIXEL_HEIGHT,
    DEFAULT_PIXEL_WIDTH,
    DEFAULT_ROWS,
    UNICODE_RESET,
    UNICODE_SET,
)

logger = logging.getLogger(__name__)

# Platforms with no cursor-addressed terminal output
_NO_PRETTY_PRINT = ("emscripten", "wasi", "ios")


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int
    pixel_width: int = 0
    pixel_height: int = 0


DEFAULT_SIZE = TerminalSize(DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_PIXEL_WIDTH, DEFAULT_PIXEL_HEIGHT)


class Terminal:
    """Terminal I/O abstraction for full-screen output."""

    @staticmethod
    def is_interactive(stream: TextIO) -> bool:
        """Whether the stream is attached to a terminal."""
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    @staticmethod
    def can_pretty_print() -> bool:
        """Whether styled, cursor-addressed output is supported here."""
        if sys.platform in _NO_PRETTY_PRINT:
            return False
        return os.environ.get("TERM") != "dumb"

    @staticmethod
    def size(fd: int) -> TerminalSize:
        """
        Get the dimensions of the terminal behind fd.

        Windows, and terminals that report a zero size, get a fixed
        default; nothing drawn here wraps, so the exact size only affects
        how many columns are used. Elsewhere a failed query raises OSError.
        """
        if sys.platform == "win32":
            return DEFAULT_SIZE

        size = os.get_terminal_size(fd)
        if size.lines == 0 or size.columns == 0:
            logger.debug("Terminal reported %dx%d, using default size", size.lines, size.columns)
            return DEFAULT_SIZE
        return TerminalSize(size.lines, size.columns)

    @staticmethod
    @contextmanager
    def raw_mode(fd: int) -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        if sys.platform == "win32":
            yield
            return

        import termios
        import tty

        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def unicode_mode(stream: TextIO) -> Iterator[None]:
        """Enable grapheme cluster width handling (mode 2027) for the duration."""
        stream.write(UNICODE_SET)
        stream.flush()
        try:
            yield
        finally:
            stream.write(UNICODE_RESET)
            stream.flush()

    @staticmethod
    @contextmanager
    def session(stream: TextIO) -> Iterator[TerminalSize]:
        """
        Full drawing session: raw mode plus unicode mode on the stream's terminal.

        Yields the terminal size. Modes are restored on every exit path.
        """
        fd = stream.fileno()
        with Terminal.raw_mode(fd):
            with Terminal.unicode_mode(stream):
                size = Terminal.size(fd)
                logger.debug("Terminal size: %d rows x %d cols", size.rows, size.cols)
                yield size
