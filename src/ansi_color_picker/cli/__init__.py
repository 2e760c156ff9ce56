"""Command-line interface and TUI components."""
