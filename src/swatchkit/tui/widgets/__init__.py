"""TUI widgets."""

from .color_picker import ColorPickerWidget, PresetSwatch
from .drag_widgets import DragWidget, SaturationSurfaceWidget, SliderWidget

__all__ = [
    "ColorPickerWidget",
    "DragWidget",
    "PresetSwatch",
    "SaturationSurfaceWidget",
    "SliderWidget",
]
