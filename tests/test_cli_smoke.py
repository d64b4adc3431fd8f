"""Smoke tests for CLI commands.

Uses Click's CliRunner so no terminal UI is started; the picker app is
patched wherever a command would open it.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from swatchkit.cli.main import cli


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Swatchkit" in result.output
        assert "--config" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @pytest.mark.parametrize("command", ["convert", "parse", "pick", "config"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestConvertCommand:
    """Test the convert command."""

    @pytest.mark.parametrize(
        "target,expected",
        [
            ("hex", "#ff5500"),
            ("rgb", "rgba(255, 85, 0, 1)"),
            ("hsl", "hsla(20, 100%, 50%, 1)"),
            ("hsv", "hsv(20, 100%, 100%)"),
        ],
    )
    def test_targets(self, runner, target, expected):
        result = runner.invoke(cli, ["convert", "#ff5500", "--to", target])
        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_translucent_to_hex(self, runner):
        result = runner.invoke(cli, ["convert", "rgba(255, 85, 0, 0.5)"])
        assert result.output.strip() == "#ff550080"

    def test_several_colors(self, runner):
        result = runner.invoke(cli, ["convert", "#fff", "hsl(0, 100%, 50%)", "-t", "rgb"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["rgba(255, 255, 255, 1)", "rgba(255, 0, 0, 1)"]

    def test_lenient_by_default(self, runner):
        result = runner.invoke(cli, ["convert", "banana"])
        assert result.exit_code == 0
        assert result.output.strip() == "#000000"

    def test_strict_reports_bad_values(self, runner):
        result = runner.invoke(cli, ["convert", "#fff", "banana", "--strict"])
        assert result.exit_code == 1
        assert "#ffffff" in result.output
        assert "Failed 1 of 2 operations" in result.output
        assert "'banana' is not a recognised color" in result.output


@pytest.mark.integration
class TestParseCommand:
    """Test the parse command."""

    def test_parse_hex(self, runner):
        result = runner.invoke(cli, ["parse", "#ff5500"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == [
            "Input: #ff5500",
            "HEX:   #ff5500",
            "RGBA:  r=255 g=85 b=0 a=1",
            "HSLA:  h=20 s=100% l=50% a=1",
            "HSV:   hsv(20, 100%, 100%)",
        ]

    def test_parse_not_a_color(self, runner):
        result = runner.invoke(cli, ["parse", "banana"])
        assert result.exit_code == 0
        assert "(not a color, using #000000)" in result.output

    def test_parse_strict(self, runner):
        result = runner.invoke(cli, ["parse", "banana", "--strict"])
        assert result.exit_code == 1
        assert "not a recognised color" in result.output


@pytest.mark.integration
class TestConfigCommands:
    """Test config subcommands against a temporary config file."""

    def test_path(self, runner, config_path):
        result = runner.invoke(cli, ["--config", str(config_path), "config", "path"])
        assert result.exit_code == 0
        assert result.output.strip() == str(config_path)

    def test_show_defaults(self, runner, config_path):
        result = runner.invoke(cli, ["--config", str(config_path), "config", "show"])
        assert result.exit_code == 0
        assert "presets: 37 swatches" in result.output
        assert "trigger_mode: both" in result.output

    def test_show_field(self, runner, config_path):
        result = runner.invoke(
            cli, ["--config", str(config_path), "config", "show", "-f", "show_alpha"]
        )
        assert result.output.strip() == "show_alpha: True"

    def test_show_unknown_field(self, runner, config_path):
        result = runner.invoke(cli, ["--config", str(config_path), "config", "show", "-f", "nope"])
        assert result.exit_code == 1

    def test_set_and_validate(self, runner, config_path):
        result = runner.invoke(
            cli,
            [
                "--config", str(config_path),
                "config", "set",
                "--no-show-alpha",
                "--trigger-mode", "icon",
                "--initial-value", "hsl(20, 100%, 50%)",
            ],
        )
        assert result.exit_code == 0
        assert "[OK] show_alpha = False" in result.output

        data = json.loads(config_path.read_text())
        assert data["show_alpha"] is False
        assert data["trigger_mode"] == "icon"
        assert data["initial_value"] == "hsl(20, 100%, 50%)"

        result = runner.invoke(cli, ["--config", str(config_path), "config", "validate"])
        assert result.exit_code == 0
        assert "[OK] Configuration is valid" in result.output

    def test_set_rejects_bad_color(self, runner, config_path):
        result = runner.invoke(
            cli, ["--config", str(config_path), "config", "set", "--initial-value", "banana"]
        )
        assert result.exit_code == 1
        assert "initial_value" in result.output
        assert not config_path.exists()

    def test_set_without_options(self, runner, config_path):
        result = runner.invoke(cli, ["--config", str(config_path), "config", "set"])
        assert result.exit_code == 1

    def test_validate_corrupted(self, runner, config_path):
        config_path.write_text("{")
        result = runner.invoke(cli, ["--config", str(config_path), "config", "validate"])
        assert result.exit_code == 1
        assert "[FAIL]" in result.output

    def test_reset(self, runner, config_path):
        config_path.write_text('{"show_alpha": false}')
        result = runner.invoke(cli, ["--config", str(config_path), "config", "reset", "--yes"])
        assert result.exit_code == 0
        assert json.loads(config_path.read_text())["show_alpha"] is True
        assert config_path.with_suffix(".json.bak").exists()

    def test_reset_aborted(self, runner, config_path):
        result = runner.invoke(
            cli, ["--config", str(config_path), "config", "reset"], input="n\n"
        )
        assert result.exit_code == 1
        assert not config_path.exists()


@pytest.mark.integration
class TestPickCommand:
    """Test the pick command with the picker app patched out."""

    def test_pick_prints_result(self, runner, temp_dir, config_path):
        log_file = temp_dir / "picker.log"
        with patch("swatchkit.tui.PickerApp") as mock_app:
            mock_app.return_value.run.return_value = "#123456"
            result = runner.invoke(
                cli,
                ["--log-file", str(log_file), "--config", str(config_path), "pick", "#ff5500"],
            )

        assert result.exit_code == 0
        assert result.output.strip() == "#123456"
        kwargs = mock_app.call_args.kwargs
        assert kwargs["value"] == "#ff5500"
        assert kwargs["config_path"] == config_path

    def test_pick_cancelled(self, runner, temp_dir, config_path):
        with patch("swatchkit.tui.PickerApp") as mock_app:
            mock_app.return_value.run.return_value = None
            result = runner.invoke(
                cli,
                ["--log-file", str(temp_dir / "p.log"), "--config", str(config_path), "pick"],
            )

        assert result.exit_code == 0
        assert result.output == ""

    def test_pick_reports_bad_config(self, runner, temp_dir, config_path):
        config_path.write_text("{")
        with patch("swatchkit.tui.PickerApp"):
            result = runner.invoke(
                cli,
                ["--log-file", str(temp_dir / "p.log"), "--config", str(config_path), "pick"],
            )

        assert result.exit_code == 1
        assert "ERROR:" in result.output
