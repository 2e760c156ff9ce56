"""Decoding of ANSI escape streams onto a virtual screen."""

from ansi_color_picker.codec.ansi_parser import AnsiParser

__all__ = ["AnsiParser"]
