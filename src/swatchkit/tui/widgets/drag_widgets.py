"""Textual renderings of the saturation surface and the sliders."""

from collections.abc import Callable

from rich.style import Style
from rich.text import Text
from textual import events
from textual.widget import Widget

from swatchkit.colors import hsv_to_rgb
from swatchkit.controls import DragControl, PointerEvent, SaturationSurface, Slider

from ..adapters import key_event_from_textual, widget_bounds

RgbTuple = tuple[int, int, int]


def _hex(rgb: RgbTuple) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _contrast(rgb: RgbTuple) -> str:
    """Black or white, whichever reads better on ``rgb``."""
    r, g, b = rgb
    return "#000000" if (r * 299 + g * 587 + b * 114) / 1000 > 128 else "#ffffff"


class DragWidget(Widget, can_focus=True):
    """
    Base for widgets driven by a ``DragControl``.

    Translates Textual mouse, focus and key events into control calls and
    implements pointer capture with ``capture_mouse()``.
    """

    DEFAULT_CSS = """
    DragWidget {
        width: 1fr;
    }

    DragWidget:focus {
        text-style: bold;
    }
    """

    def __init__(self, control: DragControl, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.control = control

    def on_mount(self) -> None:
        self.control.attach(lambda: widget_bounds(self), self)

    def on_unmount(self) -> None:
        self.control.unmount()

    # PointerCaptureTarget

    def set_pointer_capture(self, pointer_id: int) -> None:
        self.capture_mouse()

    def release_pointer_capture(self, pointer_id: int) -> None:
        self.release_mouse()

    # Events

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.focus()
        self.control.pointer_down(PointerEvent(event.screen_x, event.screen_y))
        self._sync_classes()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.control.is_dragging:
            self.control.pointer_move(PointerEvent(event.screen_x, event.screen_y))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.control.pointer_up(PointerEvent(event.screen_x, event.screen_y))
        self._sync_classes()

    def on_focus(self, event: events.Focus) -> None:
        self.control.focus()
        self._sync_classes()

    def on_blur(self, event: events.Blur) -> None:
        self.control.blur()
        self._sync_classes()

    def on_key(self, event: events.Key) -> None:
        key_event = key_event_from_textual(event.key)
        if key_event is not None and self.control.key_down(key_event):
            event.prevent_default()
            event.stop()

    def _sync_classes(self) -> None:
        self.set_class(self.control.is_dragging, "dragging")
        self.set_class(self.control.is_focused, "focused")
        self.tooltip = self.control.value_text
        self.refresh()


class SaturationSurfaceWidget(DragWidget):
    """
    2-D saturation (x) / brightness (y) area for the current hue.

    Each cell is painted with the color it selects; the handle is drawn
    in a contrasting color.
    """

    DEFAULT_CSS = """
    SaturationSurfaceWidget {
        height: 8;
        border: round $primary;
    }

    SaturationSurfaceWidget.focused {
        border: round $accent;
    }
    """

    control: SaturationSurface

    def __init__(self, control: SaturationSurface, *, id: str | None = None) -> None:
        super().__init__(control, id=id)
        self.hue = 0.0

    def set_hue(self, hue: float) -> None:
        self.hue = hue
        self.tooltip = self.control.value_text
        self.refresh()

    def render(self) -> Text:
        width, height = self.size.width, self.size.height
        text = Text()
        if width <= 0 or height <= 0:
            return text

        handle_left, handle_top = self.control.handle_position
        handle_x = round(handle_left / 100 * (width - 1))
        handle_y = round(handle_top / 100 * (height - 1))

        for row in range(height):
            v = 100 - (row / (height - 1) * 100 if height > 1 else 0)
            for col in range(width):
                s = col / (width - 1) * 100 if width > 1 else 0
                rgb = hsv_to_rgb(self.hue, s, v)
                if (col, row) == (handle_x, handle_y):
                    char = "●" if self.control.is_dragging else "○"
                    text.append(char, style=Style(color=_contrast(rgb), bgcolor=_hex(rgb)))
                else:
                    text.append(" ", style=Style(bgcolor=_hex(rgb)))
            if row < height - 1:
                text.append("\n")
        return text


class SliderWidget(DragWidget):
    """
    One-row slider track.

    ``track_color`` maps a position in [0, 1] to the color painted there,
    so the same widget renders the hue rainbow and the alpha ramp.
    """

    DEFAULT_CSS = """
    SliderWidget {
        height: 3;
        border: round $primary;
    }

    SliderWidget.focused {
        border: round $accent;
    }
    """

    control: Slider

    def __init__(
        self,
        control: Slider,
        track_color: Callable[[float], RgbTuple],
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(control, id=id)
        self.track_color = track_color
        self.border_title = control.label

    def update_track(self, track_color: Callable[[float], RgbTuple]) -> None:
        self.track_color = track_color
        self.tooltip = self.control.value_text
        self.border_subtitle = self.control.value_text
        self.refresh()

    def render(self) -> Text:
        width = self.size.width
        text = Text()
        if width <= 0:
            return text

        handle_x = round(self.control.handle_position / 100 * (width - 1))
        for col in range(width):
            rgb = self.track_color(col / (width - 1) if width > 1 else 0.0)
            if col == handle_x:
                text.append("┃", style=Style(color=_contrast(rgb), bgcolor=_hex(rgb), bold=True))
            else:
                text.append(" ", style=Style(bgcolor=_hex(rgb)))
        return text
