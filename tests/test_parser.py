"""Tests for the virtual terminal parser."""

from ansi_color_picker.codec.ansi_parser import AnsiParser


class TestAnsiParser:
    """AnsiParser interprets the escapes the widgets emit."""

    def test_plain_text_advances_cursor(self) -> None:
        parser = AnsiParser(width=20)
        parser.feed("abc")
        assert parser.canvas.row_text(0) == "abc"
        assert (parser.cursor_x, parser.cursor_y) == (3, 0)

    def test_crlf(self) -> None:
        parser = AnsiParser(width=20)
        parser.feed("ab\r\ncd")
        assert parser.canvas.row_text(0) == "ab"
        assert parser.canvas.row_text(1) == "cd"
        assert (parser.cursor_x, parser.cursor_y) == (2, 1)

    def test_state_carries_across_feeds(self) -> None:
        parser = AnsiParser(width=20)
        parser.feed("\x1b[38;2;1;2;3m")
        parser.feed("ab")
        parser.feed("\rc")
        assert parser.canvas.row_text(0) == "cb"
        assert parser.canvas.get(0, 0).fg == (1, 2, 3)

    def test_true_color_foreground_and_reset(self) -> None:
        parser = AnsiParser(width=20)
        parser.feed("\x1b[38;2;80;200;120mX\x1b[0mY")
        assert parser.canvas.get(0, 0).fg == (80, 200, 120)
        assert parser.canvas.get(1, 0).fg == 37

    def test_true_color_background(self) -> None:
        parser = AnsiParser(width=20)
        parser.feed("\x1b[48;2;9;8;7mX")
        assert parser.canvas.get(0, 0).bg == (9, 8, 7)

    def test_black_on_white_highlight(self) -> None:
        parser = AnsiParser(width=20)
        parser.feed("─\x1b[30;47m│\x1b[0m─")
        assert not parser.canvas.get(0, 0).highlighted
        assert parser.canvas.get(1, 0).highlighted
        assert parser.canvas.get(1, 0).char == "│"
        assert not parser.canvas.get(2, 0).highlighted

    def test_cursor_position(self) -> None:
        parser = AnsiParser(width=20)
        parser.feed("\x1b[3;5Hz")
        assert parser.canvas.get(4, 2).char == "z"
        assert (parser.cursor_x, parser.cursor_y) == (5, 2)

    def test_private_modes_are_ignored(self) -> None:
        parser = AnsiParser(width=20)
        parser.feed("\x1b[?25lA\x1b[?25h")
        assert parser.canvas.row_text(0) == "A"
        assert parser.cursor_x == 1

    def test_move_to_clamps(self) -> None:
        parser = AnsiParser(width=10)
        parser.move_to(50, -1)
        assert (parser.cursor_x, parser.cursor_y) == (10, 0)

    def test_move_to_pending_wrap_column(self) -> None:
        parser = AnsiParser(width=10)
        parser.feed("x" * 10)
        assert (parser.cursor_x, parser.cursor_y) == (10, 0)
        parser.move_to(0, 0)
        parser.move_to(10, 0)
        assert (parser.cursor_x, parser.cursor_y) == (10, 0)
        parser.feed("y")
        assert parser.canvas.row_text(1) == "y"
