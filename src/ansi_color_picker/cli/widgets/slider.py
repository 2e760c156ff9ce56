"""Slider widget: one bounded integer shown on a horizontal track."""

from __future__ import annotations

from ansi_color_picker.cli.core.driver import TerminalDriver
from ansi_color_picker.cli.widgets.base import InlineWidget
from ansi_color_picker.core.color import CHANNEL_MAX, CHANNEL_MIN, RESET, clamp, sgr
from ansi_color_picker.logging_setup import get_logger

logger = get_logger(__name__)

TRACK = "─"
THUMB = "│"
HIGHLIGHT = sgr("30;47")  # black on white

RGB_STEP = 8


class Slider(InlineWidget):
    """
    A bounded, stepped value rendered as ``[L] ───│─── [ 123 ]``.

    The value itself is never snapped to ``step``; only the thumb is, so
    neighbouring values may share a track position.
    """

    def __init__(
        self,
        driver: TerminalDriver,
        value: int,
        minimum: int,
        maximum: int,
        step: int,
        label: str,
    ) -> None:
        if minimum > maximum:
            raise ValueError(f"Slider minimum {minimum} exceeds maximum {maximum}")
        if step <= 0:
            raise ValueError(f"Slider step must be positive, got {step}")
        if not minimum <= value <= maximum:
            raise ValueError(f"Slider value {value} outside [{minimum}, {maximum}]")

        super().__init__(driver)
        self._value = value
        self._minimum = minimum
        self._maximum = maximum
        self._step = step
        self._label = label
        self._selected = False

    @classmethod
    def rgb(cls, driver: TerminalDriver, value: int, label: str, step: int = RGB_STEP) -> Slider:
        """Slider for one 8-bit color channel."""
        return cls(driver, value, CHANNEL_MIN, CHANNEL_MAX, step, label)

    @property
    def value(self) -> int:
        return self._value

    @property
    def minimum(self) -> int:
        return self._minimum

    @property
    def maximum(self) -> int:
        return self._maximum

    @property
    def step(self) -> int:
        return self._step

    @property
    def label(self) -> str:
        return self._label

    @property
    def selected(self) -> bool:
        return self._selected

    @property
    def thumb_position(self) -> int:
        """Track position of the thumb (value quantized by step)."""
        return self._value // self._step

    def positions(self) -> range:
        """All track positions, inclusive of both ends."""
        return range(self._minimum // self._step, self._maximum // self._step + 1)

    def set_value(self, value: int) -> None:
        """Clamp and store a new value, repainting if it changed."""
        value = clamp(value, self._minimum, self._maximum)
        if value == self._value:
            return
        logger.debug("Slider %s: %d -> %d", self._label, self._value, value)
        self._value = value
        self.repaint()

    def set_selected(self, selected: bool) -> None:
        """Toggle the thumb highlight. Always repaints once rendered."""
        self._selected = selected
        self.repaint()

    def track(self) -> str:
        """Track glyphs with the thumb, highlighted when selected."""
        thumb = self.thumb_position
        parts: list[str] = []
        for i in self.positions():
            if i != thumb:
                parts.append(TRACK)
            elif self._selected:
                parts.append(f"{HIGHLIGHT}{THUMB}{RESET}")
            else:
                parts.append(THUMB)
        return "".join(parts)

    def value_field(self) -> str:
        """Numeric readout: padded right to 2, then aligned right in 3."""
        return f" [ {str(self._value).ljust(2):>3} ]"

    def _paint(self) -> None:
        self._driver.write(f"[{self._label}] {self.track()}{self.value_field()}")
