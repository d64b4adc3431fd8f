"""Data models for the color picker."""

from .color import Hsla, HslaComponents, Hsv, Rgba, RgbaComponents
from .enums import DisplayFormat, PickerState, TriggerMode
from .config import DEFAULT_CONFIG_PATH, PickerConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    # Enums
    "DisplayFormat",
    # Models
    "Hsla",
    "HslaComponents",
    "Hsv",
    "PickerConfig",
    "PickerState",
    "Rgba",
    "RgbaComponents",
    "TriggerMode",
]
