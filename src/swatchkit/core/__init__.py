"""Core picker engine: controller, derivation and document listeners."""

from .document import Document, Element, Subscription
from .picker import PickerController
from .view import ColorView

__all__ = [
    "ColorView",
    "Document",
    "Element",
    "PickerController",
    "Subscription",
]
