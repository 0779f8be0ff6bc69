"""Tests for the drawing window and the grid and plain renderers."""

import io
import os
import sys
from contextlib import contextmanager
from typing import Iterator

import pytest

from x11_colors.cli.core.ansi_text import strip_ansi, visible_width
from x11_colors.cli.core.layout import plan_layout
from x11_colors.cli.core.terminal import DEFAULT_SIZE, Terminal, TerminalSize
from x11_colors.cli.core.window import Segment, Window
from x11_colors.core.catalog import ColorCatalog
from x11_colors.core.color import RGB
from x11_colors.core.constants import RESET, UNICODE_RESET, UNICODE_SET
from x11_colors.core.sorting import sort_names
from x11_colors.render.grid import GridRenderer, pretty_print, swatch_suffix
from x11_colors.render.plain import print_plain

_terminal_size = Terminal.size


class TestWindow:
    """Tests for Window."""

    def test_print_and_render(self) -> None:
        win = Window(20)
        result = win.print_segment(Segment("hello"), 0)
        assert result.col == 5
        assert result.overflow is False
        assert win.render() == "hello"

    def test_offset_leaves_gap(self) -> None:
        win = Window(20)
        win.print_segment(Segment("ab"), 0)
        win.print_segment(Segment("cd"), 5)
        assert win.render() == "ab   cd"

    def test_clips_without_wrapping(self) -> None:
        win = Window(5)
        result = win.print_segment(Segment("abcdefg"), 0)
        assert result.overflow is True
        assert result.col == 5
        assert win.render() == "abcde"

    def test_wide_glyphs(self) -> None:
        win = Window(4)
        assert win.print_segment(Segment("日本"), 0).col == 4
        assert win.render() == "日本"
        win.clear()
        result = win.print_segment(Segment("x日本"), 0)
        assert result.overflow is True
        assert win.render() == "x日"

    def test_combining_mark_takes_no_cell(self) -> None:
        win = Window(10)
        result = win.print_segment(Segment("e\u0301x"), 0)
        assert result.col == 2
        assert win.render() == "e\u0301x"

    def test_combining_mark_after_wide_glyph(self) -> None:
        win = Window(10)
        assert win.print_segment(Segment("日"), 0).col == 2
        result = win.print_segment(Segment("\u0301x"), 2)
        assert result.col == 3
        assert win.render() == "日\u0301x"

    def test_colored_segment(self) -> None:
        win = Window(10)
        win.print_segment(Segment("ab"), 0)
        win.print_segment(Segment("cd", RGB(255, 0, 0)), 2)
        assert win.render() == f"ab\x1b[38;2;255;0;0mcd{RESET}"

    def test_clear(self) -> None:
        win = Window(10)
        win.print_segment(Segment("abc", RGB(1, 2, 3)), 0)
        win.clear()
        assert win.render() == ""

    def test_gwidth(self) -> None:
        assert Window.gwidth("blue") == 4
        assert Window.gwidth("日本") == 4
        assert Window.gwidth("\x1b[31mred\x1b[0m") == 3


class TestGridRenderer:
    """Tests for GridRenderer."""

    def render(self, catalog: ColorCatalog, cols: int) -> tuple[list[str], str]:
        names = sort_names(catalog.keys())
        window = Window(cols)
        plan = plan_layout(names, window.gwidth, cols)
        sink = io.StringIO()
        GridRenderer(window, sink, newline="\n").render(catalog, names, plan)
        raw = sink.getvalue()
        return strip_ansi(raw).splitlines(), raw

    def test_swatch_suffix(self) -> None:
        suffix = swatch_suffix(RGB(0, 0, 255))
        assert suffix == " = #0000ff ██"
        assert visible_width(suffix) == 13

    def test_column_major_rows(self, rgb_catalog: ColorCatalog) -> None:
        lines, _ = self.render(rgb_catalog, 40)
        assert lines == [
            "blue  = #0000ff ██ Red   = #ff0000 ██",
            "Green = #008000 ██",
        ]

    def test_single_row_when_wide(self, rgb_catalog: ColorCatalog) -> None:
        lines, _ = self.render(rgb_catalog, 120)
        assert lines == [
            "blue  = #0000ff ██ Green = #008000 ██ Red   = #ff0000 ██",
        ]

    def test_single_column_when_narrow(self, rgb_catalog: ColorCatalog) -> None:
        lines, _ = self.render(rgb_catalog, 18)
        assert lines == [
            "blue  = #0000ff ██",
            "Green = #008000 ██",
            "Red   = #ff0000 ██",
        ]

    def test_suffix_is_colored(self, rgb_catalog: ColorCatalog) -> None:
        _, raw = self.render(rgb_catalog, 18)
        assert "\x1b[38;2;0;128;0m = #008000 ██\x1b[0m" in raw

    def test_rows_fit_terminal(self, x11_catalog: ColorCatalog) -> None:
        for cols in (60, 80, 121, 200):
            lines, _ = self.render(x11_catalog, cols)
            assert all(visible_width(line) <= cols for line in lines)

    def test_every_entry_rendered_once(self, x11_catalog: ColorCatalog) -> None:
        lines, _ = self.render(x11_catalog, 150)
        text = "\n".join(lines)
        # Each cell carries exactly one " = #" marker
        assert text.count(" = #") == len(x11_catalog)

    def test_zero_entries(self) -> None:
        sink = io.StringIO()
        window = Window(80)
        plan = plan_layout([], window.gwidth, 80)
        assert GridRenderer(window, sink).render(ColorCatalog(), [], plan) == 0
        assert sink.getvalue() == ""

    def test_missing_color_fails_fast(self, rgb_catalog: ColorCatalog) -> None:
        window = Window(80)
        names = ["blue", "mauve"]
        plan = plan_layout(names, window.gwidth, 80)
        with pytest.raises(KeyError):
            GridRenderer(window, io.StringIO()).render(rgb_catalog, names, plan)

    def test_default_newline_is_crlf(self, rgb_catalog: ColorCatalog) -> None:
        names = sort_names(rgb_catalog.keys())
        window = Window(18)
        sink = io.StringIO()
        GridRenderer(window, sink).render(rgb_catalog, names, plan_layout(names, window.gwidth, 18))
        assert sink.getvalue().count("\r\n") == 3


class TestPrettyPrint:
    """Tests for the terminal session around grid rendering."""

    @pytest.fixture
    def events(self, monkeypatch: pytest.MonkeyPatch) -> list[str]:
        events: list[str] = []

        @contextmanager
        def fake_raw_mode(fd: int) -> Iterator[None]:
            events.append(f"raw:{fd}")
            try:
                yield
            finally:
                events.append("restore")

        monkeypatch.setattr(Terminal, "raw_mode", staticmethod(fake_raw_mode))
        monkeypatch.setattr(Terminal, "size", staticmethod(lambda fd: TerminalSize(24, 40)))
        return events

    def test_draws_inside_session(self, rgb_catalog: ColorCatalog, tty_stream, events: list[str]) -> None:
        names = sort_names(rgb_catalog.keys())
        assert pretty_print(rgb_catalog, names, tty_stream) == 0
        out = tty_stream.getvalue()
        assert out.startswith(UNICODE_SET)
        assert out.endswith(UNICODE_RESET)
        assert strip_ansi(out).split("\r\n") == [
            "blue  = #0000ff ██ Red   = #ff0000 ██",
            "Green = #008000 ██",
            "",
        ]
        assert events == ["raw:99", "restore"]

    def test_session_restored_on_failure(
        self, rgb_catalog: ColorCatalog, tty_stream, events: list[str], monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def broken_size(fd: int) -> TerminalSize:
            raise OSError("no size")

        monkeypatch.setattr(Terminal, "size", staticmethod(broken_size))
        with pytest.raises(OSError):
            pretty_print(rgb_catalog, ["blue"], tty_stream)
        assert tty_stream.getvalue() == UNICODE_SET + UNICODE_RESET
        assert events == ["raw:99", "restore"]

    def test_zero_size_terminal_uses_default(
        self, rgb_catalog: ColorCatalog, tty_stream, events: list[str], monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(Terminal, "size", staticmethod(_terminal_size))
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((0, 0)))
        names = sort_names(rgb_catalog.keys())
        assert pretty_print(rgb_catalog, names, tty_stream) == 0
        assert strip_ansi(tty_stream.getvalue()).split("\r\n") == [
            "blue  = #0000ff ██ Green = #008000 ██ Red   = #ff0000 ██",
            "",
        ]


class TestTerminalSize:
    """Tests for Terminal.size."""

    def test_reported_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((100, 30)))
        assert Terminal.size(1) == TerminalSize(30, 100)

    @pytest.mark.parametrize("columns,lines", [(0, 0), (0, 30), (100, 0)])
    def test_zero_dimension_falls_back(self, monkeypatch: pytest.MonkeyPatch, columns: int, lines: int) -> None:
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((columns, lines)))
        assert Terminal.size(1) == DEFAULT_SIZE

    def test_windows_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "platform", "win32")
        assert Terminal.size(1) == TerminalSize(24, 120, 1024, 768)

    def test_query_failure_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(fd: int) -> os.terminal_size:
            raise OSError("not a terminal")

        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(os, "get_terminal_size", broken)
        with pytest.raises(OSError):
            Terminal.size(1)


class TestPrintPlain:
    """Tests for print_plain."""

    def test_single_line(self) -> None:
        catalog = ColorCatalog.from_mapping({"blue": (0, 0, 255)})
        out = io.StringIO()
        assert print_plain(catalog, ["blue"], out) == 0
        assert out.getvalue() == "blue = #0000ff\n"

    def test_sorted_order(self, rgb_catalog: ColorCatalog) -> None:
        out = io.StringIO()
        print_plain(rgb_catalog, sort_names(rgb_catalog.keys()), out)
        assert out.getvalue().splitlines() == [
            "blue = #0000ff",
            "Green = #008000",
            "Red = #ff0000",
        ]

    def test_empty(self) -> None:
        out = io.StringIO()
        print_plain(ColorCatalog(), [], out)
        assert out.getvalue() == ""

    def test_no_escape_sequences(self, x11_catalog: ColorCatalog) -> None:
        out = io.StringIO()
        print_plain(x11_catalog, sort_names(x11_catalog.keys()), out)
        assert "\x1b" not in out.getvalue()
        assert len(out.getvalue().splitlines()) == len(x11_catalog)
