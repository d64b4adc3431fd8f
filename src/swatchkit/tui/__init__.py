"""Textual front-end for the color picker."""

from .app import PickerApp
from .widgets import ColorPickerWidget, SaturationSurfaceWidget, SliderWidget

__all__ = ["ColorPickerWidget", "PickerApp", "SaturationSurfaceWidget", "SliderWidget"]
