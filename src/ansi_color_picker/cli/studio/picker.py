"""Interactive color picker session."""

from __future__ import annotations

from typing import Optional

from ansi_color_picker.config import PickerConfig, default_config
from ansi_color_picker.core.color import Color
from ansi_color_picker.cli.core.driver import AnsiDriver, TerminalDriver
from ansi_color_picker.cli.core.input import Key
from ansi_color_picker.cli.core.terminal import Terminal
from ansi_color_picker.cli.widgets.base import LINE_BREAK
from ansi_color_picker.cli.widgets.color_picker import ColorPicker
from ansi_color_picker.cli.widgets.status_bar import PICKER_SHORTCUTS, StatusBarWidget
from ansi_color_picker.logging_setup import get_logger

logger = get_logger(__name__)


class PickerApp:
    """
    Color picker drawn inline below the current output.

    Layout:
    - three picker rows (swatch + slider)
    - shortcut footer, where the cursor rests between keys
    Arrow keys edit, Ctrl+C finishes and returns the chosen color.
    """

    def __init__(
        self,
        config: PickerConfig = default_config,
        driver: Optional[TerminalDriver] = None,
        width: Optional[int] = None,
    ) -> None:
        self.running = False
        self.config = config
        self.driver = driver or AnsiDriver()
        self.width = width or Terminal.size().cols

        self.picker = ColorPicker.from_config(self.driver, config)
        self.status_bar = StatusBarWidget(PICKER_SHORTCUTS)

    def run(self) -> Color:
        """Main application loop."""
        self.running = True
        logger.info("Picker started at rgb%s", self.picker.rgb)

        self._reserve_lines()
        self.picker.render()
        self.driver.write(self.status_bar.render(self.width))

        while self.running:
            self._handle_input()

        self.driver.write(LINE_BREAK)
        logger.info("Picker finished at rgb%s", self.picker.rgb)
        return self.picker.color

    def _reserve_lines(self) -> None:
        """
        Make room for the picker before it pins its origin.

        Rows scrolled off after render would invalidate the stored origin,
        so the terminal is scrolled up front and the cursor moved back.
        One line break per picker row; the footer goes on the line the
        last break lands on, so it needs none of its own.
        """
        column, _ = self.driver.get_cursor_position()
        if column:
            self.driver.write(LINE_BREAK)

        rows = len(self.picker.sliders)
        self.driver.write(LINE_BREAK * rows)
        _, row = self.driver.get_cursor_position()
        self.driver.set_cursor_position(0, max(0, row - rows))

    def _handle_input(self) -> None:
        """Process one key."""
        event = self.driver.read_key()

        if event.key == Key.CTRL_C:
            self.running = False
            return

        if not self.picker.handle_input(event):
            logger.debug("Ignored key %r", event.raw)


def run_picker(config: PickerConfig = default_config) -> Color:
    """Launch the picker on the real terminal and return the chosen color."""
    with Terminal.inline_mode():
        app = PickerApp(config, AnsiDriver())
        return app.run()
