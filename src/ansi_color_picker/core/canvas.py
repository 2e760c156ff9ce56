"""Canvas - 2D grid of cells backing the virtual terminal."""

from dataclasses import dataclass, field
from typing import Iterator

from ansi_color_picker.core.cell import Cell


@dataclass
class Canvas:
    """
    A 2D grid of Cells.

    Rows are allocated lazily as the cursor moves down, so the canvas grows
    with whatever has been written to it.
    """
    width: int = 80
    _buffer: list[list[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self._buffer:
            self.ensure_row(0)

    def ensure_row(self, row: int) -> None:
        """Ensure the buffer has at least this many rows (0-indexed)."""
        while len(self._buffer) <= row:
            self._buffer.append([Cell() for _ in range(self.width)])

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if x < 0 or x >= self.width:
            raise IndexError(f"x={x} out of bounds (width={self.width})")
        self.ensure_row(y)
        return self._buffer[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        if x < 0 or x >= self.width:
            raise IndexError(f"x={x} out of bounds (width={self.width})")
        self.ensure_row(y)
        self._buffer[y][x] = cell

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def row_text(self, y: int) -> str:
        """Characters of one row with trailing blanks removed."""
        self.ensure_row(y)
        return ''.join(cell.char for cell in self._buffer[y]).rstrip()

    def snapshot(self) -> list[list[Cell]]:
        """Deep copy of every row, for comparing screen states."""
        return [[cell.copy() for cell in row] for row in self._buffer]
