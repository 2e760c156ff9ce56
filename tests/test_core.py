"""Tests for core data structures (no terminal needed)."""

import pytest

from ansi_color_picker.core.canvas import Canvas
from ansi_color_picker.core.cell import Cell
from ansi_color_picker.core.color import Color, clamp, clamp_rgb, sgr


class TestCell:
    """Tests for Cell dataclass."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.fg == 37
        assert cell.bg == 40
        assert cell.bold is False
        assert cell.reverse is False

    def test_cell_copy(self) -> None:
        cell = Cell(char='X', fg=(1, 2, 3), bg=44, bold=True)
        copy = cell.copy()
        assert copy == cell
        assert copy is not cell

    def test_highlighted(self) -> None:
        assert Cell(fg=30, bg=47).highlighted is True
        assert Cell(fg=30).highlighted is False
        assert Cell().highlighted is False


class TestCanvas:
    """Tests for Canvas."""

    def test_default_canvas(self) -> None:
        canvas = Canvas()
        assert canvas.width == 80
        assert len(list(canvas.rows())) == 1

    def test_get_set_cell(self) -> None:
        canvas = Canvas(width=40)
        canvas.set(10, 5, Cell(char='A', fg=31))
        retrieved = canvas.get(10, 5)
        assert retrieved.char == 'A'
        assert retrieved.fg == 31

    def test_auto_expand_rows(self) -> None:
        canvas = Canvas()
        canvas.set(0, 100, Cell(char='Z'))
        assert len(list(canvas.rows())) == 101
        assert canvas.get(0, 100).char == 'Z'

    def test_out_of_bounds_x(self) -> None:
        canvas = Canvas(width=80)
        with pytest.raises(IndexError):
            canvas.get(80, 0)
        with pytest.raises(IndexError):
            canvas.set(-1, 0, Cell())

    def test_row_text_strips_trailing_blanks(self) -> None:
        canvas = Canvas(width=10)
        canvas.set(1, 0, Cell(char='h'))
        canvas.set(2, 0, Cell(char='i'))
        assert canvas.row_text(0) == " hi"
        assert canvas.row_text(3) == ""

    def test_snapshot_is_detached(self) -> None:
        canvas = Canvas(width=4)
        canvas.set(0, 0, Cell(char='a'))
        snap = canvas.snapshot()
        canvas.get(0, 0).char = 'b'
        assert snap[0][0].char == 'a'
        assert snap != canvas.snapshot()


class TestColor:
    """Tests for Color and channel helpers."""

    def test_from_rgb(self) -> None:
        color = Color.from_rgb(255, 128, 64)
        assert color.rgb == (255, 128, 64)

    def test_from_rgb_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color.from_rgb(256, 0, 0)
        with pytest.raises(ValueError):
            Color.from_rgb(0, -1, 0)

    def test_to_sgr(self) -> None:
        assert Color.from_rgb(80, 200, 120).to_sgr_fg() == "38;2;80;200;120"

    def test_hex(self) -> None:
        assert Color.from_rgb(80, 200, 120).hex == "#50C878"
        assert Color.from_rgb(0, 0, 0).hex == "#000000"

    def test_sgr(self) -> None:
        assert sgr("30;47") == "\x1b[30;47m"

    def test_clamp(self) -> None:
        assert clamp(5, 0, 10) == 5
        assert clamp(-3, 0, 10) == 0
        assert clamp(11, 0, 10) == 10

    def test_clamp_rgb(self) -> None:
        assert clamp_rgb(300, -5, 120) == (255, 0, 120)
        assert clamp_rgb(0, 255, 128) == (0, 255, 128)
