"""Drag/step controls for the saturation surface and the sliders."""

from .drag import DragControl, SaturationSurface, Slider
from .events import Bounds, Key, KeyEvent, PointerEvent
from .state import DragSurfaceState

__all__ = [
    "Bounds",
    "DragControl",
    "DragSurfaceState",
    "Key",
    "KeyEvent",
    "PointerEvent",
    "SaturationSurface",
    "Slider",
]
