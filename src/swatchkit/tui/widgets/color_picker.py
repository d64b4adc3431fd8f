"""Color picker widget: trigger swatch, popover with controls, fields and presets."""

import logging

from rich.style import Style
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Grid, Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Input, Label, Static

from swatchkit.colors import hsv_to_rgb, parse_color
from swatchkit.core import Document, PickerController
from swatchkit.models import DisplayFormat, PickerConfig
from swatchkit.protocols import PickerEvent

from ..adapters import WidgetNode
from .drag_widgets import SaturationSurfaceWidget, SliderWidget

logger = logging.getLogger(__name__)

# Checkerboard-ish base used to show transparency on the alpha track
_ALPHA_BASE = (64, 64, 64)


class PresetSwatch(Static):
    """A single preset color cell."""

    DEFAULT_CSS = """
    PresetSwatch {
        width: 4;
        height: 1;
    }

    PresetSwatch.selected {
        text-style: bold reverse;
    }
    """

    class Selected(Message):
        """Message posted when a preset is clicked."""

        def __init__(self, preset: str):
            super().__init__()
            self.preset = preset

    def __init__(self, preset: str, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.preset = preset
        self.tooltip = preset

    def render(self) -> Text:
        rgba = parse_color(self.preset)
        marker = " ✓ " if self.has_class("selected") else "   "
        return Text(marker, style=Style(bgcolor=f"#{rgba.r:02x}{rgba.g:02x}{rgba.b:02x}"))

    def on_click(self) -> None:
        self.post_message(self.Selected(self.preset))


class ColorPickerWidget(Vertical):
    """
    Textual front-end for one ``PickerController``.

    The widget is a renderer: all state lives in the controller, and the
    widget redraws itself as a ``PickerObserver``. New colors are posted as
    ``ColorPickerWidget.Changed`` messages.
    """

    DEFAULT_CSS = """
    ColorPickerWidget {
        height: auto;
        width: 60;
    }

    ColorPickerWidget #trigger {
        width: 100%;
    }

    ColorPickerWidget #popover {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    ColorPickerWidget #popover.closed {
        display: none;
    }

    ColorPickerWidget .format-row, ColorPickerWidget .field-row {
        height: auto;
    }

    ColorPickerWidget .format-row Button {
        min-width: 8;
    }

    ColorPickerWidget .format-row Button.active {
        background: $accent;
    }

    ColorPickerWidget .field-row Input {
        width: 1fr;
    }

    ColorPickerWidget .field-row.hidden {
        display: none;
    }

    ColorPickerWidget #presets {
        grid-size: 8;
        grid-gutter: 0 1;
        height: auto;
    }
    """

    FIELD_SLOTS = 4

    class Changed(Message):
        """Message posted when the picker emits a new color."""

        def __init__(self, value: str):
            super().__init__()
            self.value = value

    def __init__(
        self,
        value: str | None = None,
        config: PickerConfig | None = None,
        document: Document | None = None,
        *,
        id: str | None = None,
    ) -> None:
        """
        Initialize the picker widget.

        Args:
            value: Initial color (defaults to the config's initial value)
            config: Picker options (defaults to PickerConfig())
            document: App-level document that receives outside clicks and
                Escape presses
        """
        super().__init__(id=id)
        self.config = config or PickerConfig()
        self.controller = PickerController.from_config(
            self.config,
            value=value,
            on_change=self._on_controller_change,
            document=document,
        )

    # =================================================================
    # Layout
    # =================================================================

    def compose(self) -> ComposeResult:
        controller = self.controller
        yield Button(controller.trigger_label(), id="trigger")

        with Vertical(id="popover", classes="closed"):
            yield SaturationSurfaceWidget(controller.surface, id="surface")
            yield SliderWidget(controller.hue_slider, self._hue_track, id="hue")
            if controller.alpha_slider is not None:
                yield SliderWidget(controller.alpha_slider, self._alpha_track, id="alpha")

            with Horizontal(classes="format-row"):
                for fmt in DisplayFormat:
                    yield Button(fmt.value.upper(), id=f"format-{fmt.value}")

            with Horizontal(classes="field-row", id="hex-row"):
                yield Label("HEX ")
                yield Input(
                    controller.hex_text,
                    restrict=r"#?[0-9a-fA-F]*",
                    max_length=9,
                    id="hex-input",
                )

            with Horizontal(classes="field-row", id="component-row"):
                for slot in range(self.FIELD_SLOTS):
                    yield Input("", restrict=r"-?\d*\.?\d*", id=f"field-{slot}")

            if controller.show_presets:
                with Grid(id="presets"):
                    for index, preset in enumerate(controller.visible_presets):
                        yield PresetSwatch(preset, id=f"preset-{index}")

    def on_mount(self) -> None:
        self.controller.trigger = WidgetNode(self.query_one("#trigger", Button))
        self.controller.popover = WidgetNode(self.query_one("#popover", Vertical))
        self.controller.register_observer(self)
        self.refresh_display()

    def on_unmount(self) -> None:
        self.controller.unregister_observer(self)
        self.controller.unmount()

    # =================================================================
    # Controller callbacks
    # =================================================================

    def _on_controller_change(self, value: str) -> None:
        self.post_message(self.Changed(value))

    def on_picker_event(self, event: PickerEvent, value: str) -> None:
        """Redraw after any picker event."""
        logger.debug(f"Picker event {event.value}: {value}")
        if self.is_mounted:
            self.refresh_display()

    def _hue_track(self, position: float) -> tuple[int, int, int]:
        return hsv_to_rgb(position * 360, 100, 100)

    def _alpha_track(self, position: float) -> tuple[int, int, int]:
        rgba = self.controller.view.rgba
        channels = zip((rgba.r, rgba.g, rgba.b), _ALPHA_BASE)
        return tuple(round(c * position + base * (1 - position)) for c, base in channels)

    # =================================================================
    # Rendering
    # =================================================================

    def refresh_display(self) -> None:
        """Push the controller state into every child widget."""
        controller = self.controller
        view = controller.view

        trigger = self.query_one("#trigger", Button)
        trigger.label = Text.assemble(
            ("   ", Style(bgcolor=view.hex[:7])), " ", controller.trigger_label()
        )
        self.query_one("#popover").set_class(not controller.is_open, "closed")

        self.query_one("#surface", SaturationSurfaceWidget).set_hue(view.hsv.h)
        self.query_one("#hue", SliderWidget).update_track(self._hue_track)
        if controller.alpha_slider is not None:
            self.query_one("#alpha", SliderWidget).update_track(self._alpha_track)

        for fmt in DisplayFormat:
            button = self.query_one(f"#format-{fmt.value}", Button)
            button.set_class(fmt == controller.display_format, "active")

        self._refresh_fields()

        for swatch in self.query(PresetSwatch):
            swatch.set_class(controller.is_preset_selected(swatch.preset), "selected")
            swatch.refresh()

    def _refresh_fields(self) -> None:
        controller = self.controller
        is_hex = controller.display_format == DisplayFormat.HEX
        self.query_one("#hex-row").set_class(not is_hex, "hidden")
        self.query_one("#component-row").set_class(is_hex, "hidden")

        hex_input = self.query_one("#hex-input", Input)
        if hex_input.value != controller.hex_text:
            hex_input.value = controller.hex_text

        keys = controller.component_keys()
        values = controller.component_values()
        for slot in range(self.FIELD_SLOTS):
            field = self.query_one(f"#field-{slot}", Input)
            if slot < len(keys):
                key = keys[slot]
                field.placeholder = key.upper()
                field.border_title = key.upper()
                if field.value != values[key]:
                    field.value = values[key]

    # =================================================================
    # Event handlers
    # =================================================================

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "trigger":
            event.stop()
            self.controller.activate_trigger()
        elif button_id.startswith("format-"):
            event.stop()
            self.controller.switch_format(button_id.removeprefix("format-"))

    def on_input_changed(self, event: Input.Changed) -> None:
        input_id = event.input.id or ""
        controller = self.controller
        if input_id == "hex-input":
            event.stop()
            if event.value != controller.hex_text and not controller.edit_hex(event.value):
                self._refresh_fields()
        elif input_id.startswith("field-"):
            event.stop()
            keys = controller.component_keys()
            slot = int(input_id.removeprefix("field-"))
            if slot >= len(keys):
                return
            key = keys[slot]
            if event.value != controller.component_values()[key]:
                if not controller.edit_component(key, event.value):
                    # Put back the text of the last accepted value
                    self._refresh_fields()

    def on_preset_swatch_selected(self, message: PresetSwatch.Selected) -> None:
        message.stop()
        self.controller.select_preset(message.preset)
