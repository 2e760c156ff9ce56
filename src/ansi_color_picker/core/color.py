"""Color representation and channel clamping helpers."""

from dataclasses import dataclass


CHANNEL_MIN = 0
CHANNEL_MAX = 255

RESET = "\x1b[0m"


def sgr(params: str) -> str:
    """Build an SGR escape sequence from its parameter string."""
    return f"\x1b[{params}m"


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Pin value into the inclusive range [minimum, maximum]."""
    return max(minimum, min(value, maximum))


def clamp_rgb(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Clamp each channel independently into [0, 255]."""
    return (
        clamp(r, CHANNEL_MIN, CHANNEL_MAX),
        clamp(g, CHANNEL_MIN, CHANNEL_MAX),
        clamp(b, CHANNEL_MIN, CHANNEL_MAX),
    )


@dataclass(frozen=True)
class Color:
    """A 24-bit terminal color."""
    r: int
    g: int
    b: int

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(CHANNEL_MIN <= c <= CHANNEL_MAX for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(r, g, b)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    @property
    def hex(self) -> str:
        """Hex notation, e.g. '#50C878'."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        return f"38;2;{self.r};{self.g};{self.b}"
