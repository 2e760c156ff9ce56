"""Inline TUI widgets."""

from ansi_color_picker.cli.widgets.base import InlineWidget, LINE_BREAK
from ansi_color_picker.cli.widgets.slider import Slider
from ansi_color_picker.cli.widgets.color_picker import ColorPicker
from ansi_color_picker.cli.widgets.status_bar import StatusBarWidget, Shortcut

__all__ = [
    "InlineWidget",
    "LINE_BREAK",
    "Slider",
    "ColorPicker",
    "StatusBarWidget",
    "Shortcut",
]
