"""Typer CLI application."""

from dataclasses import replace
from typing import Annotated, Optional

import typer
from rich.console import Console

from ansi_color_picker.config import PickerConfig, default_config
from ansi_color_picker.core.color import Color
from ansi_color_picker.logging_setup import get_logger, setup_logging

logger = get_logger(__name__)

# Key letters understood by `preview --keys`
PREVIEW_KEYS = {
    "u": "UP",
    "d": "DOWN",
    "l": "LEFT",
    "r": "RIGHT",
}

RedOption = Annotated[int, typer.Option("--red", "-r", help="Initial red channel (0-255)")]
GreenOption = Annotated[int, typer.Option("--green", "-g", help="Initial green channel (0-255)")]
BlueOption = Annotated[int, typer.Option("--blue", "-b", help="Initial blue channel (0-255)")]


def _describe(console: Console, color: Color) -> None:
    r, g, b = color.rgb
    console.print(f"[{color.hex}]████████[/] [bold]{color.hex}[/]  rgb({r}, {g}, {b})")


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-color-picker",
        help="Pick a 24-bit color with three sliders drawn in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.command()
    def pick(
        red: RedOption = default_config.red,
        green: GreenOption = default_config.green,
        blue: BlueOption = default_config.blue,
        log_file: Annotated[Optional[str], typer.Option(
            "--log-file",
            envvar="ANSI_COLOR_PICKER_LOG_FILE",
            help="Write logs to this file (nothing is logged otherwise)",
        )] = default_config.log_file,
        log_level: Annotated[str, typer.Option("--log-level", help="Log level")] = default_config.log_level,
    ) -> None:
        """Open the interactive picker below the current line."""
        from ansi_color_picker.cli.core.driver import TerminalError
        from ansi_color_picker.cli.studio.picker import run_picker

        config = replace(
            default_config,
            red=red,
            green=green,
            blue=blue,
            log_file=log_file,
            log_level=log_level,
        )
        setup_logging(level=config.log_level, log_file=config.log_file)

        try:
            color = run_picker(config)
        except ValueError as e:
            err_console.print(f"[red]Invalid color: {e}[/]")
            raise typer.Exit(1)
        except TerminalError as e:
            logger.error("Terminal failure: %s", e)
            err_console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        _describe(console, color)

    @app.command()
    def preview(
        red: RedOption = default_config.red,
        green: GreenOption = default_config.green,
        blue: BlueOption = default_config.blue,
        keys: Annotated[str, typer.Option(
            "--keys", "-k",
            help="Keys to replay: u/d select a channel, l/r adjust it",
        )] = "",
    ) -> None:
        """Render the picker off-screen, replay keys and print the result."""
        from ansi_color_picker.cli.core.driver import CanvasDriver
        from ansi_color_picker.cli.core.input import Key, KeyEvent
        from ansi_color_picker.cli.studio.picker import PickerApp

        unknown = sorted(set(keys) - set(PREVIEW_KEYS))
        if unknown:
            raise typer.BadParameter(
                f"unknown key(s) {''.join(unknown)!r}, use u/d/l/r", param_hint="--keys"
            )

        events = [KeyEvent(key=Key[PREVIEW_KEYS[k]], raw=k) for k in keys]
        config: PickerConfig = replace(default_config, red=red, green=green, blue=blue)
        driver = CanvasDriver(keys=events)

        try:
            color = PickerApp(config, driver, width=driver.canvas.width).run()
        except ValueError as e:
            err_console.print(f"[red]Invalid color: {e}[/]")
            raise typer.Exit(1)

        print(driver.text(mark_highlight="┃"))
        _describe(console, color)

    return app
