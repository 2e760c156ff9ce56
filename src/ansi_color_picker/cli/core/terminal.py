"""Low-level terminal operations - platform-independent abstraction."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O for an inline widget."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        sys.stdout.write('\x1b[0m')
        sys.stdout.flush()

    @staticmethod
    def hide_cursor() -> None:
        """Hide the cursor."""
        sys.stdout.write('\x1b[?25l')
        sys.stdout.flush()

    @staticmethod
    def show_cursor() -> None:
        """Show the cursor."""
        sys.stdout.write('\x1b[?25h')
        sys.stdout.flush()

    @staticmethod
    def move_to(row: int, col: int) -> None:
        """Move cursor to position (1-indexed)."""
        sys.stdout.write(f'\x1b[{row};{col}H')
        sys.stdout.flush()

    @staticmethod
    def request_cursor_position() -> None:
        """Ask the terminal to report the cursor position (DSR 6)."""
        sys.stdout.write('\x1b[6n')
        sys.stdout.flush()

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def inline_mode() -> Iterator[None]:
        """Hidden cursor and raw input, drawing into the normal screen buffer."""
        Terminal.hide_cursor()
        try:
            with Terminal.raw_mode():
                yield
        finally:
            Terminal.reset()
            Terminal.show_cursor()
