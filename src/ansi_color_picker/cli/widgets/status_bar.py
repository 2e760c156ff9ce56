"""Status bar widget: one line of keyboard shortcuts under the picker."""

from __future__ import annotations

from dataclasses import dataclass

from ansi_color_picker.cli.core.ansi_text import truncate, visible_len


@dataclass
class Shortcut:
    """A keyboard shortcut to display."""
    key: str
    label: str


class StatusBarWidget:
    """Single-line shortcut strip, written once below the picker."""

    def __init__(self, shortcuts: list[Shortcut]) -> None:
        self._shortcuts = list(shortcuts)

    def render(self, width: int) -> str:
        """Render the bar, never wider than width visible columns."""
        line = "".join(
            f"\x1b[7m {sc.key} \x1b[0;36m {sc.label} \x1b[0m" for sc in self._shortcuts
        )
        if visible_len(line) > width:
            line = truncate(line, width)
        return line


PICKER_SHORTCUTS = [
    Shortcut("↑↓", "Channel"),
    Shortcut("←→", "Adjust"),
    Shortcut("Ctrl+C", "Done"),
]
