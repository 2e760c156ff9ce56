"""Terminal plumbing: raw I/O, key decoding and drivers."""

from ansi_color_picker.cli.core.terminal import Terminal, TerminalSize
from ansi_color_picker.cli.core.input import InputReader, KeyEvent, Key
from ansi_color_picker.cli.core.driver import (
    AnsiDriver,
    CanvasDriver,
    Position,
    TerminalDriver,
    TerminalError,
    saved_cursor,
)

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "AnsiDriver",
    "CanvasDriver",
    "Position",
    "TerminalDriver",
    "TerminalError",
    "saved_cursor",
]
