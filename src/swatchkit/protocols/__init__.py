"""Protocol definitions for the picker's observer pattern and collaborators.

- Events: picker lifecycle and document-level input
- Observers: protocols for components that react to these events
- Collaborators: containment and pointer-capture hooks supplied by renderers
"""

from .events import DocumentEvent, PickerEvent
from .observers import Containable, PickerObserver, PointerCaptureTarget

__all__ = [
    "Containable",
    # Events
    "DocumentEvent",
    "PickerEvent",
    # Observers
    "PickerObserver",
    "PointerCaptureTarget",
]
