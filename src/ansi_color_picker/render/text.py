"""Render the virtual screen to plain text (strip colors)."""

from ansi_color_picker.core.canvas import Canvas


class TextRenderer:
    """Render a Canvas to plain text without any styling."""

    def __init__(self, mark_highlight: str | None = None):
        # Optional replacement glyph for highlighted cells, so a plain-text
        # dump still shows which slider is selected
        self.mark_highlight = mark_highlight

    def render(self, canvas: Canvas) -> str:
        """Render canvas to plain text."""
        lines: list[str] = []

        for row in canvas.rows():
            line = ''.join(
                self.mark_highlight if self.mark_highlight and cell.highlighted else cell.char
                for cell in row
            )
            lines.append(line.rstrip())

        return '\n'.join(lines).rstrip('\n')
