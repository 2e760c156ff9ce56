"""Cell - one character position on the virtual screen."""

from dataclasses import dataclass

# SGR code (30-37, 90-97 / 40-47, 100-107) or a 24-bit RGB triple
CellColor = int | tuple[int, int, int]


@dataclass(slots=True)
class Cell:
    """
    A single character cell with styling attributes.

    Colors are kept as the terminal saw them: a plain SGR code for the
    16-color palette, or an RGB triple for 24-bit colors.
    """
    char: str = ' '
    fg: CellColor = 37   # Default foreground (white)
    bg: CellColor = 40   # Default background (black)
    bold: bool = False
    reverse: bool = False

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(
            char=self.char,
            fg=self.fg,
            bg=self.bg,
            bold=self.bold,
            reverse=self.reverse,
        )

    @property
    def highlighted(self) -> bool:
        """Black-on-white, the style of a selected slider thumb."""
        return self.fg == 30 and self.bg == 47
