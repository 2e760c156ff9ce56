"""Terminal drivers: the cursor/write/read surface widgets paint through.

Widgets never talk to ``sys.stdout`` directly. They receive a driver and use
four primitives: read the cursor position, move the cursor, write raw text
and read the next key. ``AnsiDriver`` maps those onto a real VT terminal;
``CanvasDriver`` interprets the same output on an in-memory screen.
"""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Protocol, runtime_checkable

from ansi_color_picker.codec.ansi_parser import AnsiParser
from ansi_color_picker.core.canvas import Canvas
from ansi_color_picker.cli.core.input import InputReader, Key, KeyEvent
from ansi_color_picker.cli.core.terminal import Terminal
from ansi_color_picker.logging_setup import get_logger
from ansi_color_picker.render.text import TextRenderer

logger = get_logger(__name__)

# (column, row), 0-indexed
Position = tuple[int, int]


class TerminalError(RuntimeError):
    """The terminal did not behave as a VT-compatible device."""


@runtime_checkable
class TerminalDriver(Protocol):
    """Protocol for the terminal a widget paints on."""

    def get_cursor_position(self) -> Position:
        """Current cursor position as (column, row)."""
        ...

    def set_cursor_position(self, column: int, row: int) -> None:
        """Move the cursor."""
        ...

    def write(self, text: str) -> None:
        """Write raw text; no newline translation."""
        ...

    def read_key(self) -> KeyEvent:
        """Block until the next key event."""
        ...


@contextmanager
def saved_cursor(driver: TerminalDriver) -> Iterator[Position]:
    """
    Restore the cursor to where it was on entry, whatever the body does.

    No other output may be interleaved while the block runs; the restore
    jumps back to the captured coordinates, not to a terminal-side save slot.
    """
    position = driver.get_cursor_position()
    try:
        yield position
    finally:
        driver.set_cursor_position(*position)


class AnsiDriver:
    """Driver for a real terminal in raw mode."""

    def __init__(self, reader: Optional[InputReader] = None, report_timeout: float = 0.5) -> None:
        self.input = reader or InputReader()
        self.report_timeout = report_timeout

    def get_cursor_position(self) -> Position:
        Terminal.request_cursor_position()
        report = self.input.read_cursor_report(self.report_timeout)
        if report is None:
            raise TerminalError(
                "Terminal did not report the cursor position "
                f"within {self.report_timeout:.1f}s"
            )
        row, col = report
        return col - 1, row - 1

    def set_cursor_position(self, column: int, row: int) -> None:
        Terminal.move_to(row + 1, column + 1)

    def write(self, text: str) -> None:
        Terminal.write(text)

    def read_key(self) -> KeyEvent:
        return self.input.read_blocking()


class CanvasDriver:
    """
    Headless driver backed by a virtual terminal.

    Output is interpreted by an AnsiParser onto a Canvas, so callers can
    inspect exactly what a real terminal would display. Keys are served from
    a script; once it runs dry every read returns Ctrl+C.
    """

    def __init__(self, width: int = 80, keys: Iterable[KeyEvent] = ()) -> None:
        self.parser = AnsiParser(width=width)
        self._keys: deque[KeyEvent] = deque(keys)

    @property
    def canvas(self) -> Canvas:
        return self.parser.get_canvas()

    def get_cursor_position(self) -> Position:
        return self.parser.cursor_x, self.parser.cursor_y

    def set_cursor_position(self, column: int, row: int) -> None:
        self.parser.move_to(column, row)

    def write(self, text: str) -> None:
        self.parser.feed(text)

    def push_keys(self, *events: KeyEvent) -> None:
        """Queue key events for read_key."""
        self._keys.extend(events)

    def read_key(self) -> KeyEvent:
        if self._keys:
            return self._keys.popleft()
        logger.debug("Key script exhausted, sending Ctrl+C")
        return KeyEvent(key=Key.CTRL_C, raw='\x03')

    def text(self, mark_highlight: str | None = None) -> str:
        """Plain-text dump of the screen."""
        return TextRenderer(mark_highlight=mark_highlight).render(self.canvas)
