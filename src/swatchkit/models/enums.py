"""Enumerations for the color picker."""

from enum import Enum


class DisplayFormat(str, Enum):
    """Textual format the picker displays and emits."""

    HEX = "hex"  # #rrggbb or #rrggbbaa
    RGB = "rgb"  # rgba(r, g, b, a)
    HSL = "hsl"  # hsla(h, s%, l%, a)

    @classmethod
    def detect(cls, value: str | None) -> "DisplayFormat":
        """Detect the format of a color string from its prefix.

        Anything that doesn't start with ``rgb`` or ``hsl`` is treated as HEX.
        """
        normalized = (value or "").strip().lower()
        if normalized.startswith("rgb"):
            return cls.RGB
        if normalized.startswith("hsl"):
            return cls.HSL
        return cls.HEX


class TriggerMode(str, Enum):
    """What the trigger button shows next to the swatch."""

    TEXT = "text"  # Label only
    ICON = "icon"  # Icon only
    BOTH = "both"  # Icon followed by label


class PickerState(str, Enum):
    """Popover state of a picker controller."""

    CLOSED = "closed"
    OPEN = "open"
