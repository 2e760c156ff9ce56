"""Pytest configuration: headless drivers for widget tests."""

from typing import Iterable

import pytest

from ansi_color_picker.cli.core.driver import CanvasDriver, Position
from ansi_color_picker.cli.core.input import KeyEvent


class RecordingDriver(CanvasDriver):
    """CanvasDriver that also logs every primitive call it receives."""

    def __init__(self, width: int = 80, keys: Iterable[KeyEvent] = ()) -> None:
        super().__init__(width=width, keys=keys)
        self.calls: list[tuple] = []

    def get_cursor_position(self) -> Position:
        position = super().get_cursor_position()
        self.calls.append(("get",) + position)
        return position

    def set_cursor_position(self, column: int, row: int) -> None:
        self.calls.append(("move", column, row))
        super().set_cursor_position(column, row)

    def write(self, text: str) -> None:
        self.calls.append(("write", text))
        super().write(text)

    @property
    def writes(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "write"]

    @property
    def moves(self) -> list[tuple[int, int]]:
        return [call[1:] for call in self.calls if call[0] == "move"]

    def side_effects(self) -> list[tuple]:
        """Calls that change the screen or the cursor."""
        return [call for call in self.calls if call[0] != "get"]


@pytest.fixture
def driver() -> RecordingDriver:
    """Fresh 80-column virtual terminal with call recording."""
    return RecordingDriver()
