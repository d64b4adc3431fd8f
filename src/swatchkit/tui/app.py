"""Terminal color picker application."""

import logging
from pathlib import Path
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.errors import NoWidget
from textual.widgets import Footer, Header, Static

from swatchkit.controls import Key, KeyEvent
from swatchkit.core import Document
from swatchkit.models import PickerConfig

from .decorators import handle_action_errors
from .widgets import ColorPickerWidget

logger = logging.getLogger(__name__)


class PickerApp(App[str]):
    """
    Hosts one color picker.

    The app owns the ``Document`` the picker listens to: every mouse press
    and Escape key anywhere in the app is reported to it, which is how the
    popover closes on outside clicks.

    ``run()`` returns the accepted color, or None when cancelled.
    """

    TITLE = "Swatchkit"

    CSS = """
    Screen {
        align: center top;
        padding: 1;
    }

    #value-line {
        width: 60;
        height: 1;
        margin-top: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss_popover", "Close Picker", show=True, priority=True),
        Binding("ctrl+s", "accept", "Accept", show=True),
        Binding("ctrl+q", "cancel", "Cancel", show=True),
        Binding("ctrl+d", "save_default", "Save as Default", show=True),
    ]

    def __init__(
        self,
        config: Optional[PickerConfig] = None,
        value: Optional[str] = None,
        config_path: Optional[Path] = None,
    ):
        """
        Initialize the application.

        Args:
            config: Picker options (defaults to PickerConfig())
            value: Initial color (defaults to the config's initial value)
            config_path: Where "save as default" writes (default config file if None)
        """
        super().__init__()
        self.config = config or PickerConfig()
        self.config_path = config_path
        self.document = Document()
        self._initial_value = value
        logger.info("PickerApp created")

    def compose(self) -> ComposeResult:
        yield Header()
        yield ColorPickerWidget(
            value=self._initial_value,
            config=self.config,
            document=self.document,
            id="picker",
        )
        yield Static(id="value-line")
        yield Footer()

    def on_mount(self) -> None:
        self._update_value_line(self.picker.controller.value)

    @property
    def picker(self) -> ColorPickerWidget:
        return self.query_one("#picker", ColorPickerWidget)

    @property
    def value(self) -> str:
        return self.picker.controller.value

    def _update_value_line(self, value: str) -> None:
        self.query_one("#value-line", Static).update(f"Value: {value or '(none)'}")

    # =================================================================
    # Document forwarding
    # =================================================================

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """Report every press to the document (outside-click detection)."""
        try:
            target, _ = self.screen.get_widget_at(event.screen_x, event.screen_y)
        except NoWidget:
            target = self.screen
        self.document.pointer_down(target)

    def action_dismiss_popover(self) -> None:
        self.document.key_down(KeyEvent(key=Key.ESCAPE))

    # =================================================================
    # Picker messages and actions
    # =================================================================

    def on_color_picker_widget_changed(self, message: ColorPickerWidget.Changed) -> None:
        logger.debug(f"Color changed: {message.value}")
        self._update_value_line(message.value)

    def action_accept(self) -> None:
        logger.info(f"Accepted color {self.value}")
        self.exit(self.value)

    def action_cancel(self) -> None:
        logger.info("Picker cancelled")
        self.exit(None)

    @handle_action_errors("save default color")
    def action_save_default(self) -> None:
        """Store the current color as the configured initial value."""
        updated = self.config.model_copy(update={"initial_value": self.value})
        PickerConfig.model_validate(updated.model_dump()).save(self.config_path)
        self.config = updated
        self.notify(f"Saved {self.value} as default", timeout=3)
