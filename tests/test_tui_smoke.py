"""Smoke tests for the TUI using Textual's test framework.

These drive the picker app with a pilot and check that clicks and keys
reach the controller. Detailed emission rules are covered in test_picker.
"""

import pytest
from textual.widgets import Input

from swatchkit.models import DisplayFormat, PickerConfig
from swatchkit.tui import ColorPickerWidget, PickerApp


@pytest.fixture
def app(config_path):
    """Picker app starting on pure red with default options."""
    return PickerApp(config=PickerConfig(), value="#ff0000", config_path=config_path)


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUILaunch:
    """Test that the TUI can launch and render."""

    async def test_launches_closed(self, app):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.pause()

            assert app.query_one("#picker", ColorPickerWidget) is not None
            assert not app.picker.controller.is_open
            assert app.query_one("#popover").has_class("closed")

    async def test_without_presets(self):
        app = PickerApp(config=PickerConfig(show_presets=False, show_alpha=False))

        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.pause()

            assert len(app.query("#presets")) == 0
            assert len(app.query("#alpha")) == 0


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUIInteraction:
    """Test pointer and keyboard interaction through the app."""

    async def test_trigger_opens_and_escape_closes(self, app):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.click("#trigger")
            await pilot.pause()

            assert app.picker.controller.is_open
            assert not app.query_one("#popover").has_class("closed")
            assert app.document.listener_count() == 2

            await pilot.press("escape")
            await pilot.pause()

            assert not app.picker.controller.is_open
            assert app.document.listener_count() == 0

    async def test_click_outside_closes(self, app):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.click("#trigger")
            await pilot.pause()

            await pilot.click("#value-line")
            await pilot.pause()

            assert not app.picker.controller.is_open

    async def test_preset_click(self, app):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.click("#trigger")
            await pilot.pause()

            await pilot.click("#preset-0")
            await pilot.pause()

            assert app.value == "#000000"
            assert app.picker.controller.is_open

    async def test_hue_keys(self, app):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.click("#trigger")
            await pilot.pause()

            app.query_one("#hue").focus()
            await pilot.press("shift+right")
            await pilot.pause()

            assert app.value == "#ff9900"
            assert app.picker.controller.hue_slider.value == 36

    async def test_format_switch_keeps_value(self, app):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.click("#trigger")
            await pilot.pause()

            await pilot.click("#format-rgb")
            await pilot.pause()

            assert app.picker.controller.display_format == DisplayFormat.RGB
            assert app.value == "#ff0000"
            assert app.query_one("#hex-row").has_class("hidden")

    async def test_rejected_field_edit_is_reverted(self, app):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.click("#trigger")
            await pilot.pause()
            await pilot.click("#format-rgb")
            await pilot.pause()

            alpha_field = app.query_one("#field-3", Input)
            alpha_field.value = "0.555"
            await pilot.pause()

            assert app.value == "#ff0000"
            assert alpha_field.value == "1"

    async def test_accepted_field_edit_emits(self, app):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.click("#trigger")
            await pilot.pause()
            await pilot.click("#format-rgb")
            await pilot.pause()

            app.query_one("#field-3", Input).value = "0.5"
            await pilot.pause()

            assert app.value == "rgba(255, 0, 0, 0.5)"

    async def test_accept_returns_value(self, app):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.press("ctrl+s")
            await pilot.pause()

        assert app.return_value == "#ff0000"

    async def test_save_default(self, app, config_path):
        async with app.run_test(size=(100, 60)) as pilot:
            await pilot.press("ctrl+d")
            await pilot.pause()

        assert PickerConfig.load_or_default(config_path).initial_value == "#ff0000"
