"""Picker controller: open/close state, display format and emission rules."""

import logging
import re
from collections.abc import Callable, Iterable
from contextlib import ExitStack
from typing import Any

from swatchkit.colors.conversions import format_color, hsv_to_rgb
from swatchkit.colors.parsing import HSLA_PATTERN, RGBA_PATTERN, is_hex_color
from swatchkit.colors.presets import DEFAULT_PRESETS
from swatchkit.controls import Key, KeyEvent, SaturationSurface, Slider
from swatchkit.models import DisplayFormat, PickerConfig, PickerState, Rgba, TriggerMode
from swatchkit.observer import ObserverManager
from swatchkit.protocols import Containable, DocumentEvent, PickerEvent, PickerObserver
from swatchkit.utils import clamp, format_number, parse_float, round_half_up

from .document import Document
from .view import ColorView

logger = logging.getLogger(__name__)

# Permissive intermediate states while typing: "", "-", ".", "12.", ".5"
_NUMERIC_EDIT = re.compile(r"^-?\d*\.?\d*$")
_HEX_EDIT = re.compile(r"^#?[0-9a-fA-F]*$")
_MAX_HEX_LENGTH = 9

# Component ranges (inclusive) for integer fields
_COMPONENT_RANGES = {
    "r": (0, 255),
    "g": (0, 255),
    "b": (0, 255),
    "h": (0, 360),
    "s": (0, 100),
    "l": (0, 100),
}

TRIGGER_ICONS = {PickerState.CLOSED: "✎", PickerState.OPEN: "✕"}
TRIGGER_TEXT = {PickerState.CLOSED: "Edit Color", PickerState.OPEN: "Close"}


class PickerController:
    """
    Headless color picker.

    The controller holds one external color string and derives everything
    else from it on demand (see ``ColorView``). User interactions are
    turned into new color strings and reported through ``on_change``.

    States:
        CLOSED -> OPEN on trigger activation
        OPEN -> CLOSED on toggle, a pointer press outside the trigger and
        popover, or Escape

    The outside-press and Escape listeners exist only while OPEN; they are
    subscribed on open and cancelled on close and on ``unmount()``.

    Emission rules:
        - Every emitted string is in the active display format
          (``#rrggbb[aa]``, ``rgba(...)`` or ``hsla(...)``)
        - Switching format never emits
        - Preset selection emits the preset string unchanged
        - HEX typing emits only once the text is a complete hex color
    """

    def __init__(
        self,
        value: str | None = None,
        on_change: Callable[[str], None] | None = None,
        *,
        show_alpha: bool = True,
        show_presets: bool = True,
        presets: Iterable[str] | None = None,
        trigger_mode: TriggerMode = TriggerMode.BOTH,
        document: Document | None = None,
        trigger: Containable | None = None,
        popover: Containable | None = None,
    ) -> None:
        """
        Initialize the picker.

        Args:
            value: Initial external color string (any supported format)
            on_change: Called with the new color string on every committed
                interaction
            show_alpha: Expose the opacity slider
            show_presets: Expose the preset swatches
            presets: Preset hex strings (defaults to DEFAULT_PRESETS)
            trigger_mode: Whether the trigger shows text, icon or both
            document: Document to listen to while open (a private one if None)
            trigger: Rendered trigger node, for outside-press detection
            popover: Rendered popover node, for outside-press detection
        """
        self._value = value if value is not None else ""
        self._on_change = on_change
        self.show_alpha = show_alpha
        self.show_presets = show_presets
        self.presets: tuple[str, ...] = tuple(presets) if presets is not None else DEFAULT_PRESETS
        self.trigger_mode = TriggerMode(trigger_mode)
        self.document = document if document is not None else Document()
        self.trigger = trigger
        self.popover = popover

        self._state = PickerState.CLOSED
        self._format = DisplayFormat.detect(self._value)
        self._hex_draft: str | None = None
        self._listeners: ExitStack | None = None
        self._observers = ObserverManager[PickerObserver](observer_type_name="picker")

        self.surface = SaturationSurface(on_change=self.handle_surface_change)
        self.hue_slider = Slider(on_change=self.handle_hue_change, max=360, label="Hue")
        self.alpha_slider: Slider | None = (
            Slider(on_change=self.handle_alpha_change, max=1, label="Opacity")
            if show_alpha
            else None
        )
        self._sync_controls()

    @classmethod
    def from_config(
        cls,
        config: PickerConfig,
        value: str | None = None,
        on_change: Callable[[str], None] | None = None,
        **kwargs: Any,
    ) -> "PickerController":
        """Create a picker from a ``PickerConfig``.

        ``value`` defaults to ``config.initial_value``.
        """
        return cls(
            value=value if value is not None else config.initial_value,
            on_change=on_change,
            show_alpha=config.show_alpha,
            show_presets=config.show_presets,
            presets=config.presets,
            trigger_mode=config.trigger_mode,
            **kwargs,
        )

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: PickerObserver) -> None:
        """Register an observer to receive picker events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: PickerObserver) -> None:
        """Unregister a previously registered observer."""
        self._observers.unregister(observer)

    def _notify(self, event: PickerEvent) -> None:
        self._observers.notify("on_picker_event", event, self._value)

    # =================================================================
    # State
    # =================================================================

    @property
    def value(self) -> str:
        """The current external color string, as last emitted or set."""
        return self._value

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state == PickerState.OPEN

    @property
    def display_format(self) -> DisplayFormat:
        return self._format

    @property
    def view(self) -> ColorView:
        """All representations of the current color, derived on every read."""
        return ColorView.derive(self._value)

    @property
    def hex_text(self) -> str:
        """Text of the HEX field: the raw draft while typing, else the derived hex."""
        if self._hex_draft is not None:
            return self._hex_draft
        return self.view.hex

    @property
    def visible_presets(self) -> tuple[str, ...]:
        return self.presets if self.show_presets else ()

    def set_value(self, value: str | None) -> None:
        """
        Replace the value from outside (the caller's controlled value).

        Does not call ``on_change`` and does not re-detect the display
        format while open. Any HEX draft is discarded.
        """
        self._value = value if value is not None else ""
        self._hex_draft = None
        self._sync_controls()
        self._notify(PickerEvent.COLOR_CHANGED)

    # =================================================================
    # Open / close
    # =================================================================

    def open(self) -> None:
        """Open the popover and detect the display format from the value."""
        if self._state == PickerState.OPEN:
            return

        self._state = PickerState.OPEN
        self._format = DisplayFormat.detect(self._value)
        self._hex_draft = None
        self._install_listeners()
        logger.info(f"Picker opened ({self._format.value}, value={self._value!r})")
        self._notify(PickerEvent.OPENED)

    def close(self) -> None:
        """Close the popover and drop the document listeners."""
        if self._state == PickerState.CLOSED:
            return

        self._remove_listeners()
        self._state = PickerState.CLOSED
        self._hex_draft = None
        logger.info(f"Picker closed (value={self._value!r})")
        self._notify(PickerEvent.CLOSED)

    def toggle(self) -> None:
        if self._state == PickerState.OPEN:
            self.close()
        else:
            self.open()

    def activate_trigger(self, key_event: KeyEvent | None = None) -> bool:
        """
        Handle activation of the trigger swatch.

        Args:
            key_event: The key pressed on the trigger, or None for a click

        Returns:
            True if the activation toggled the picker
        """
        if key_event is not None and key_event.key not in (Key.ENTER, Key.SPACE):
            return False
        self.toggle()
        return True

    def unmount(self) -> None:
        """Tear down listeners and control state; the picker ends CLOSED."""
        self._remove_listeners()
        self._state = PickerState.CLOSED
        self._hex_draft = None
        self.surface.unmount()
        self.hue_slider.unmount()
        if self.alpha_slider is not None:
            self.alpha_slider.unmount()
        logger.debug("Picker unmounted")

    def _install_listeners(self) -> None:
        stack = ExitStack()
        stack.enter_context(
            self.document.subscribe(DocumentEvent.POINTER_DOWN, self._on_document_pointer_down)
        )
        stack.enter_context(
            self.document.subscribe(DocumentEvent.KEY_DOWN, self._on_document_key_down)
        )
        self._listeners = stack

    def _remove_listeners(self) -> None:
        if self._listeners is not None:
            self._listeners.close()
            self._listeners = None

    def _on_document_pointer_down(self, target: Any) -> None:
        for node in (self.trigger, self.popover):
            if node is not None and node.contains(target):
                return
        logger.debug(f"Pointer down outside picker on {target!r}")
        self.close()

    def _on_document_key_down(self, key_event: KeyEvent) -> None:
        if key_event.key == Key.ESCAPE:
            self.close()

    # =================================================================
    # Trigger and presets
    # =================================================================

    def trigger_label(self) -> str:
        """Trigger content for the current state and trigger mode."""
        icon = TRIGGER_ICONS[self._state]
        text = TRIGGER_TEXT[self._state]
        if self.trigger_mode == TriggerMode.ICON:
            return icon
        if self.trigger_mode == TriggerMode.TEXT:
            return text
        return f"{icon} {text}"

    def is_preset_selected(self, preset: str) -> bool:
        return self._value.lower() == preset.lower()

    def select_preset(self, preset: str) -> None:
        """Emit a preset exactly as given, whatever the display format."""
        logger.debug(f"Preset selected: {preset}")
        self._emit(preset)

    # =================================================================
    # Format
    # =================================================================

    def switch_format(self, fmt: DisplayFormat | str) -> None:
        """Change the display format. Never emits; the color is untouched."""
        fmt = DisplayFormat(fmt)
        self._hex_draft = None
        if fmt == self._format:
            return
        self._format = fmt
        logger.debug(f"Display format switched to {fmt.value}")
        self._notify(PickerEvent.FORMAT_CHANGED)

    # =================================================================
    # Control handlers
    # =================================================================

    def handle_surface_change(self, s: float, v: float) -> None:
        """Saturation/value picked on the surface; hue and alpha are kept."""
        view = self.view
        r, g, b = hsv_to_rgb(view.hsv.h, s, v)
        self._emit(format_color(Rgba(r=r, g=g, b=b, a=view.rgba.a), self._format))

    def handle_hue_change(self, h: float) -> None:
        """Hue picked on the slider; saturation, value and alpha are kept."""
        view = self.view
        r, g, b = hsv_to_rgb(h, view.hsv.s, view.hsv.v)
        self._emit(format_color(Rgba(r=r, g=g, b=b, a=view.rgba.a), self._format))

    def handle_alpha_change(self, a: float) -> None:
        """
        Opacity picked on the slider, rounded to 2 decimals.

        In HSL mode the current HSLA fields are kept and only alpha is
        replaced, so the hue of achromatic colors survives.
        """
        alpha = clamp(round_half_up(a, 2), 0.0, 1.0)
        view = self.view
        if self._format == DisplayFormat.HSL:
            self._emit(view.hsla.model_copy(update={"a": alpha}).to_css())
        else:
            self._emit(format_color(view.rgba.model_copy(update={"a": alpha}), self._format))

    # =================================================================
    # Field edits
    # =================================================================

    def component_keys(self) -> tuple[str, ...]:
        """Numeric fields shown for the current format."""
        if self._format == DisplayFormat.RGB:
            return ("r", "g", "b", "a")
        if self._format == DisplayFormat.HSL:
            return ("h", "s", "l", "a")
        return ()

    def component_values(self) -> dict[str, str]:
        """Current text of each numeric field."""
        view = self.view
        if self._format == DisplayFormat.RGB:
            return view.rgba_components.model_dump()
        if self._format == DisplayFormat.HSL:
            return view.hsla_components.model_dump()
        return {}

    def edit_component(self, key: str, text: str) -> bool:
        """
        Apply an edit of one numeric field.

        Out-of-range numbers are clamped. Text that is not a number-in-
        progress, or alpha with more than two decimals, is ignored. The
        other fields keep their current values.

        Args:
            key: Field name (``r``/``g``/``b``/``a`` or ``h``/``s``/``l``/``a``)
            text: New field text

        Returns:
            True if a new value was emitted
        """
        if key not in self.component_keys():
            logger.debug(f"Ignoring edit of {key!r} in {self._format.value} mode")
            return False
        if not _NUMERIC_EDIT.match(text):
            return False

        if key == "a":
            if "." in text and len(text.split(".", 1)[1]) > 2:
                return False
            number = parse_float(text, default=None)
            if number is not None:
                if number < 0:
                    text = "0"
                elif number > 1:
                    text = "1"
        else:
            number = parse_float(text, default=None)
            if number is not None:
                low, high = _COMPONENT_RANGES[key]
                text = format_number(clamp(round_half_up(number), low, high))

        fields = self.component_values()
        fields[key] = text
        if self._format == DisplayFormat.RGB:
            candidate = f"rgba({fields['r']}, {fields['g']}, {fields['b']}, {fields['a']})"
            pattern = RGBA_PATTERN
        else:
            candidate = f"hsla({fields['h']}, {fields['s']}%, {fields['l']}%, {fields['a']})"
            pattern = HSLA_PATTERN

        if not pattern.fullmatch(candidate):
            logger.debug(f"Holding back unparseable edit {candidate!r}")
            return False

        self._emit(candidate)
        return True

    def edit_hex(self, text: str) -> bool:
        """
        Apply an edit of the HEX field.

        The text is kept as a draft so partial input such as ``#`` or
        ``#1a`` stays visible. Only complete 3, 6 or 8 digit colors are
        emitted, always with a leading ``#``.

        Returns:
            True if the edit was accepted (emitted or kept as a draft)
        """
        if len(text) > _MAX_HEX_LENGTH or not _HEX_EDIT.match(text):
            return False

        self._hex_draft = text
        if is_hex_color(text, require_hash=False):
            value = text if text.startswith("#") else f"#{text}"
            self._emit(value, keep_draft=True)
        else:
            self._notify(PickerEvent.DRAFT_CHANGED)
        return True

    # =================================================================
    # Emission
    # =================================================================

    def _emit(self, value: str, keep_draft: bool = False) -> None:
        logger.debug(f"Emitting {value!r}")
        self._value = value
        if not keep_draft:
            self._hex_draft = None
        self._sync_controls()
        self._notify(PickerEvent.COLOR_CHANGED)
        if self._on_change is not None:
            self._on_change(value)

    def _sync_controls(self) -> None:
        """Write the derived values back into the controlled controls."""
        view = self.view
        self.surface.s = view.hsv.s
        self.surface.v = view.hsv.v
        self.hue_slider.value = view.hsv.h
        if self.alpha_slider is not None:
            self.alpha_slider.value = view.rgba.a
