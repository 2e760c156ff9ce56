"""ANSI escape sequence parser with virtual terminal emulation."""

import re

from ansi_color_picker.core.canvas import Canvas
from ansi_color_picker.core.cell import Cell, CellColor


class AnsiParser:
    """
    Stateful ANSI parser that processes text into a Canvas.

    Simulates a virtual terminal to correctly interpret cursor movements,
    color codes, and other ANSI escape sequences. Text may be fed in any
    number of pieces; the cursor and SGR state carry over between calls.
    """

    # Regex for CSI sequences: ESC [ params command
    CSI_PATTERN = re.compile(r'\x1b\[([0-9;?]*)([A-Za-z])')

    def __init__(self, width: int = 80):
        self.width = width
        self.canvas = Canvas(width=width)

        # Terminal state
        self.cursor_x = 0
        self.cursor_y = 0
        self.fg: CellColor = 37  # Default white
        self.bg: CellColor = 40  # Default black
        self.bold = False
        self.reverse = False

    def feed(self, text: str) -> None:
        """Process text with ANSI sequences."""
        i = 0
        while i < len(text):
            if text[i] == '\x1b' and i + 1 < len(text) and text[i + 1] == '[':
                match = self.CSI_PATTERN.match(text, i)
                if match:
                    self._handle_csi(match.group(1), match.group(2))
                    i = match.end()
                    continue

            char = text[i]
            if char == '\r':
                self.cursor_x = 0
            elif char == '\n':
                self.cursor_y += 1
                self.canvas.ensure_row(self.cursor_y)
            elif char == '\x1b':
                # Unhandled escape - skip
                pass
            else:
                self._put_char(char)

            i += 1

    def move_to(self, x: int, y: int) -> None:
        """
        Place the cursor at a 0-indexed position.

        Column ``width`` is the pending-wrap spot after a full line, so a
        position read there can be restored exactly.
        """
        self.cursor_x = max(0, min(x, self.width))
        self.cursor_y = max(0, y)
        self.canvas.ensure_row(self.cursor_y)

    def _put_char(self, char: str) -> None:
        """Put a character at current cursor position."""
        if self.cursor_x >= self.width:
            self.cursor_x = 0
            self.cursor_y += 1

        self.canvas.set(self.cursor_x, self.cursor_y, Cell(
            char=char,
            fg=self.fg,
            bg=self.bg,
            bold=self.bold,
            reverse=self.reverse,
        ))
        self.cursor_x += 1

    def _handle_csi(self, params_str: str, command: str) -> None:
        """Handle a CSI escape sequence."""
        if params_str.startswith('?'):
            # Private modes (cursor visibility etc.) don't touch the grid
            return

        params: list[int] = []
        if params_str:
            params = [int(p) if p else 0 for p in params_str.split(';')]

        if command == 'm':
            self._handle_sgr(params)
        elif command == 'H':
            row = params[0] if params else 1
            col = params[1] if len(params) > 1 else 1
            self.move_to(col - 1, row - 1)

    def _handle_sgr(self, params: list[int]) -> None:
        """Handle SGR (Select Graphic Rendition) parameters."""
        if not params:
            params = [0]

        i = 0
        while i < len(params):
            p = params[i]

            if p == 0:
                self.fg = 37
                self.bg = 40
                self.bold = False
                self.reverse = False
            elif p == 1:
                self.bold = True
            elif p == 7:
                self.reverse = True
            elif p == 22:
                self.bold = False
            elif p == 27:
                self.reverse = False
            elif 30 <= p <= 37 or 90 <= p <= 97:
                self.fg = p
            elif p == 38 or p == 48:
                color, consumed = self._extended_color(params, i + 1)
                if color is not None:
                    if p == 38:
                        self.fg = color
                    else:
                        self.bg = color
                i += consumed
            elif p == 39:
                self.fg = 37
            elif 40 <= p <= 47 or 100 <= p <= 107:
                self.bg = p
            elif p == 49:
                self.bg = 40

            i += 1

    @staticmethod
    def _extended_color(params: list[int], i: int) -> tuple[CellColor | None, int]:
        """Decode '5;n' or '2;r;g;b' following a 38/48 parameter."""
        if i < len(params) and params[i] == 5 and i + 1 < len(params):
            return params[i + 1], 2
        if i < len(params) and params[i] == 2 and i + 3 < len(params):
            r, g, b = params[i + 1:i + 4]
            return (r, g, b), 4
        return None, 0

    def get_canvas(self) -> Canvas:
        """Get the resulting canvas."""
        return self.canvas
