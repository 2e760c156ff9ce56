"""
ansi-color-picker: an RGB color picker drawn inline in the terminal

Three sliders and a live swatch are painted below the current line and
repainted in place as arrow keys move the selection or nudge a channel.

Quick Start:
    >>> from ansi_color_picker import CanvasDriver, ColorPicker
    >>> driver = CanvasDriver()
    >>> picker = ColorPicker(driver, 80, 200, 120)
    >>> picker.render()
    >>> picker.select_right()
    >>> picker.rgb
    (81, 200, 120)

Features:
    - Sliders that remember their screen origin and repaint in place
    - Cursor position restored after every repaint
    - Real terminal driver (VT escapes, DSR cursor queries, raw input)
    - Headless virtual-terminal driver for tests and previews
"""

__version__ = "0.1.0"

from ansi_color_picker.config import PickerConfig, default_config
from ansi_color_picker.core.color import Color, clamp, clamp_rgb
from ansi_color_picker.cli.core.driver import (
    AnsiDriver,
    CanvasDriver,
    TerminalDriver,
    TerminalError,
    saved_cursor,
)
from ansi_color_picker.cli.widgets.slider import Slider
from ansi_color_picker.cli.widgets.color_picker import ColorPicker

__all__ = [
    "__version__",
    # Widgets
    "Slider",
    "ColorPicker",
    # Drivers
    "TerminalDriver",
    "AnsiDriver",
    "CanvasDriver",
    "TerminalError",
    "saved_cursor",
    # Support
    "Color",
    "clamp",
    "clamp_rgb",
    "PickerConfig",
    "default_config",
]
