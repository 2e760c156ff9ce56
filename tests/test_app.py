"""Tests for the picker session and the command-line interface."""

from typer.testing import CliRunner

from ansi_color_picker.cli.app import create_app
from ansi_color_picker.cli.core.input import Key, KeyEvent
from ansi_color_picker.cli.studio.picker import PickerApp
from ansi_color_picker.config import PickerConfig

runner = CliRunner()


def keys(*names: str) -> list[KeyEvent]:
    return [KeyEvent(key=Key[name]) for name in names]


class TestPickerApp:
    """PickerApp lays the widget out below existing output."""

    def test_returns_chosen_color(self, driver) -> None:
        driver.push_keys(*keys("RIGHT", "DOWN", "LEFT", "LEFT"))
        color = PickerApp(PickerConfig(), driver, width=80).run()
        assert color.rgb == (81, 198, 120)

    def test_layout_below_prompt(self, driver) -> None:
        driver.write("$ prompt")
        app = PickerApp(PickerConfig(), driver, width=80)
        app.run()

        assert driver.canvas.row_text(0) == "$ prompt"
        assert app.picker.origin == (0, 1)
        assert driver.canvas.row_text(1).endswith("[  80 ]")
        assert "Channel" in driver.canvas.row_text(4)
        assert driver.get_cursor_position() == (0, 5)

    def test_cursor_rests_on_footer_between_keys(self, driver) -> None:
        driver.push_keys(*keys("RIGHT"))
        app = PickerApp(PickerConfig(), driver, width=80)
        app.run()

        # picker on rows 0-2, footer on row 3; the repaint for RIGHT jumped
        # back to wherever the footer left it
        assert app.picker.origin == (0, 0)
        footer_end = driver.moves[-1]
        assert footer_end[1] == 3
        assert footer_end[0] > 0

    def test_ignores_unmapped_keys(self, driver) -> None:
        driver.push_keys(KeyEvent(char="x", raw="x"), *keys("ENTER"))
        color = PickerApp(PickerConfig(), driver, width=80).run()
        assert color.rgb == (80, 200, 120)

    def test_footer_respects_width(self, driver) -> None:
        PickerApp(PickerConfig(), driver, width=12).run()
        assert len(driver.canvas.row_text(4)) <= 12


class TestPreviewCommand:
    """`preview` renders headlessly and replays keys."""

    def test_default_preview(self) -> None:
        result = runner.invoke(create_app(), ["preview"])
        assert result.exit_code == 0
        assert "[R] " in result.output
        assert "[  80 ]" in result.output
        assert "#50C878" in result.output

    def test_replays_keys(self) -> None:
        result = runner.invoke(create_app(), ["preview", "--keys", "rrd"])
        assert result.exit_code == 0
        assert "[  82 ]" in result.output
        assert "#52C878" in result.output
        green_line = next(line for line in result.output.splitlines() if "[G] " in line)
        assert "┃" in green_line

    def test_initial_color_options(self) -> None:
        result = runner.invoke(create_app(), ["preview", "-r", "0", "-g", "0", "-b", "255"])
        assert result.exit_code == 0
        assert "#0000FF" in result.output

    def test_rejects_unknown_keys(self) -> None:
        result = runner.invoke(create_app(), ["preview", "--keys", "rx"])
        assert result.exit_code != 0

    def test_rejects_out_of_range_channel(self) -> None:
        result = runner.invoke(create_app(), ["preview", "--red", "300"])
        assert result.exit_code == 1
