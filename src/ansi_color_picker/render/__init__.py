"""Renderers for dumping the virtual screen."""

from ansi_color_picker.render.text import TextRenderer

__all__ = ["TextRenderer"]
