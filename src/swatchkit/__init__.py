"""Swatchkit: color model, tolerant color parsing and a headless color picker."""

__version__ = "0.1.0"

# Color model and conversions
from .colors import parse_color, parse_hsla_components, parse_rgba_components

# Picker engine
from .core import ColorView, Document, PickerController
from .models import DisplayFormat, PickerConfig, Rgba

__all__ = [
    "ColorView",
    "DisplayFormat",
    "Document",
    "PickerConfig",
    "PickerController",
    "Rgba",
    "parse_color",
    "parse_hsla_components",
    "parse_rgba_components",
]
