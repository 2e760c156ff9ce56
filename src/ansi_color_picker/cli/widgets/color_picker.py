"""RGB color picker: a live swatch beside three channel sliders."""

from __future__ import annotations

from ansi_color_picker.cli.core.driver import TerminalDriver, saved_cursor
from ansi_color_picker.cli.core.input import Key, KeyEvent
from ansi_color_picker.cli.widgets.base import LINE_BREAK, InlineWidget
from ansi_color_picker.cli.widgets.slider import RGB_STEP, Slider
from ansi_color_picker.config import PickerConfig
from ansi_color_picker.core.color import RESET, Color, clamp_rgb, sgr
from ansi_color_picker.logging_setup import get_logger

logger = get_logger(__name__)

SWATCH = "█"
CHANNEL_LABELS = ("R", "G", "B")


class ColorPicker(InlineWidget):
    """
    Three stacked rows, one per channel::

        ████████  [R] ──────────│───────────────────── [  80 ]
        ████████  [G] ─────────────────────────│────── [ 200 ]
        ████████  [B] ───────────────│──────────────── [ 120 ]

    The swatch on every row shows the current color. Up/down moves the
    selection between sliders, left/right nudges the selected channel.
    The picker's RGB triple always equals the sliders' values.
    """

    def __init__(
        self,
        driver: TerminalDriver,
        red: int = 80,
        green: int = 200,
        blue: int = 120,
        step: int = RGB_STEP,
        swatch_width: int = 8,
    ) -> None:
        super().__init__(driver)
        self._red = red
        self._green = green
        self._blue = blue
        self._swatch_width = swatch_width
        self._sliders = tuple(
            Slider.rgb(driver, value, label, step)
            for value, label in zip((red, green, blue), CHANNEL_LABELS)
        )
        self._selected_index = 0
        self._sliders[0].set_selected(True)

    @classmethod
    def from_config(cls, driver: TerminalDriver, config: PickerConfig) -> ColorPicker:
        return cls(
            driver,
            config.red,
            config.green,
            config.blue,
            step=config.step,
            swatch_width=config.swatch_width,
        )

    @property
    def red(self) -> int:
        return self._red

    @property
    def green(self) -> int:
        return self._green

    @property
    def blue(self) -> int:
        return self._blue

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self._red, self._green, self._blue

    @property
    def color(self) -> Color:
        return Color.from_rgb(*self.rgb)

    @property
    def sliders(self) -> tuple[Slider, ...]:
        return self._sliders

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected_slider(self) -> Slider:
        return self._sliders[self._selected_index]

    def _paint_swatch(self) -> None:
        self._driver.write(
            f"{sgr(self.color.to_sgr_fg())}{SWATCH * self._swatch_width}{RESET}  "
        )

    def _paint(self) -> None:
        for slider in self._sliders:
            self._paint_swatch()
            slider.render()
            self._driver.write(LINE_BREAK)

    def update(self, red: int, green: int, blue: int) -> None:
        """Set all three channels (clamped), repainting rows that changed."""
        rgb = clamp_rgb(red, green, blue)
        if rgb == self.rgb:
            return
        logger.debug("Color %s -> %s", self.rgb, rgb)
        self._red, self._green, self._blue = rgb

        if not self._has_rendered or self._origin is None:
            for slider, value in zip(self._sliders, rgb):
                slider.set_value(value)
            return

        # Every swatch takes the new color; each slider repaints itself
        # only if its own value moved
        with saved_cursor(self._driver):
            self._driver.set_cursor_position(*self._origin)
            for slider, value in zip(self._sliders, rgb):
                self._paint_swatch()
                slider.set_value(value)
                self._driver.write(LINE_BREAK)

    def _move_selection(self, delta: int) -> None:
        index = self._selected_index + delta
        if not 0 <= index < len(self._sliders):
            return
        self._sliders[self._selected_index].set_selected(False)
        self._selected_index = index
        self._sliders[index].set_selected(True)

    def select_up(self) -> None:
        self._move_selection(-1)

    def select_down(self) -> None:
        self._move_selection(1)

    def _nudge(self, delta: int) -> None:
        channels = list(self.rgb)
        channels[self._selected_index] += delta
        self.update(*channels)

    def select_left(self) -> None:
        self._nudge(-1)

    def select_right(self) -> None:
        self._nudge(1)

    def handle_input(self, event: KeyEvent) -> bool:
        """Arrow keys drive selection and value; anything else is ignored."""
        if event.key == Key.UP:
            self.select_up()
        elif event.key == Key.DOWN:
            self.select_down()
        elif event.key == Key.LEFT:
            self.select_left()
        elif event.key == Key.RIGHT:
            self.select_right()
        else:
            return False
        return True
