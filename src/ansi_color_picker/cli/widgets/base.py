"""Base class for widgets painted inline at the cursor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ansi_color_picker.cli.core.driver import Position, TerminalDriver, saved_cursor
from ansi_color_picker.cli.core.input import KeyEvent
from ansi_color_picker.logging_setup import get_logger

logger = get_logger(__name__)

# Raw mode disables output post-processing, so a line break needs both
LINE_BREAK = "\r\n"


class InlineWidget(ABC):
    """
    A widget drawn where the cursor happens to be.

    The first ``render()`` pins the widget's origin to the cursor position.
    Later state changes repaint the widget at that origin and put the cursor
    back where the caller left it, so whatever else is on screen, the
    caller's cursor included, is left alone.
    """

    def __init__(self, driver: TerminalDriver) -> None:
        self._driver = driver
        self._origin: Optional[Position] = None
        self._has_rendered = False

    @property
    def driver(self) -> TerminalDriver:
        return self._driver

    @property
    def origin(self) -> Optional[Position]:
        """Screen position of the first render, None before it."""
        return self._origin

    @property
    def has_rendered(self) -> bool:
        return self._has_rendered

    def render(self) -> None:
        """Paint at the current cursor position and remember it as origin."""
        self._origin = self._driver.get_cursor_position()
        self._paint()
        self._has_rendered = True

    def repaint(self) -> None:
        """Paint over the previous rendering, keeping the cursor in place."""
        if not self._has_rendered or self._origin is None:
            return
        logger.debug("Repainting %s at %s", type(self).__name__, self._origin)
        with saved_cursor(self._driver):
            self._driver.set_cursor_position(*self._origin)
            self._paint()

    @abstractmethod
    def _paint(self) -> None:
        """Write the widget starting at the current cursor position."""
        pass

    def handle_input(self, event: KeyEvent) -> bool:
        """Default: don't consume events."""
        return False
