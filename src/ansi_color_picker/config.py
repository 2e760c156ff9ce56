"""Configuration for the color picker."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PickerConfig:
    """Settings for an interactive picker session."""

    # Initial color
    red: int = 80
    green: int = 200
    blue: int = 120

    # Track granularity shared by the three channel sliders
    step: int = 8  # 32 track positions for 0..255

    swatch_width: int = 8

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None


# Default configuration instance
default_config = PickerConfig()
