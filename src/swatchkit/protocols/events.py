"""Picker events for the observer pattern.

- Picker events: popover lifecycle and value changes, sent to picker observers
- Document events: page-level input the picker listens to while open
"""

from enum import Enum


class PickerEvent(Enum):
    """Events emitted by a picker controller to its observers."""

    OPENED = "opened"                  # Popover opened (format re-detected)
    CLOSED = "closed"                  # Popover closed (toggle, outside click or Escape)
    COLOR_CHANGED = "color_changed"    # Value changed (emitted or set externally)
    FORMAT_CHANGED = "format_changed"  # Display format switched (no value change)
    DRAFT_CHANGED = "draft_changed"    # Raw HEX text changed without a new color


class DocumentEvent(Enum):
    """Page-level events dispatched through a Document."""

    POINTER_DOWN = "pointer_down"  # Pointer pressed anywhere
    KEY_DOWN = "key_down"          # Key pressed anywhere
