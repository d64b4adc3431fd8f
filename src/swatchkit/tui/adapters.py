"""Glue between Textual widgets and the renderer-neutral picker core."""

from typing import Any

from textual.widget import Widget

from swatchkit.controls import Bounds, Key, KeyEvent

# Textual key names -> control key names
TEXTUAL_KEYS = {
    "left": Key.ARROW_LEFT,
    "right": Key.ARROW_RIGHT,
    "up": Key.ARROW_UP,
    "down": Key.ARROW_DOWN,
    "home": Key.HOME,
    "end": Key.END,
    "pageup": Key.PAGE_UP,
    "pagedown": Key.PAGE_DOWN,
    "escape": Key.ESCAPE,
    "enter": Key.ENTER,
    "space": Key.SPACE,
}


def key_event_from_textual(key: str) -> KeyEvent | None:
    """
    Translate a Textual key name (``"shift+left"``) to a ``KeyEvent``.

    Returns:
        The event, or None for keys the controls don't use
    """
    shift = key.startswith("shift+")
    name = key.removeprefix("shift+")
    mapped = TEXTUAL_KEYS.get(name)
    if mapped is None:
        return None
    return KeyEvent(key=mapped, shift=shift)


def widget_bounds(widget: Widget) -> Bounds | None:
    """
    Bounds of a widget's content area in screen cells.

    Width and height span from the first to the last cell, so a pointer on
    the last column maps to the maximum value.
    """
    region = widget.content_region
    if region.width <= 0 or region.height <= 0:
        return None
    return Bounds(
        left=region.x,
        top=region.y,
        width=max(region.width - 1, 1),
        height=max(region.height - 1, 1),
    )


class WidgetNode:
    """Containment check for a mounted Textual widget."""

    def __init__(self, widget: Widget):
        self.widget = widget

    def contains(self, target: Any) -> bool:
        """True if ``target`` is the widget or one of its descendants."""
        if not isinstance(target, Widget):
            return False
        return self.widget in target.ancestors_with_self

    def __repr__(self) -> str:
        return f"WidgetNode({self.widget!r})"
