"""Core data structures: screen cells, canvas and colors."""

from ansi_color_picker.core.cell import Cell
from ansi_color_picker.core.canvas import Canvas
from ansi_color_picker.core.color import Color, clamp, clamp_rgb

__all__ = ["Cell", "Canvas", "Color", "clamp", "clamp_rgb"]
