"""Observer and collaborator protocols.

- Picker observers: React to picker lifecycle and value changes
- Containable: Anything that can answer "is this target inside me?"
- Pointer capture targets: Rendered nodes that can capture a pointer
"""

from typing import Any, Protocol, runtime_checkable

from .events import PickerEvent


@runtime_checkable
class PickerObserver(Protocol):
    """
    Observer that receives picker events.

    Renderers register one of these to know when to redraw. It is
    independent of the caller's ``on_change`` callback: a format switch
    notifies observers but never calls ``on_change``.
    """

    def on_picker_event(self, event: PickerEvent, value: str) -> None:
        """
        Handle a picker event.

        Args:
            event: The type of picker event
            value: The picker's current external color string

        Error Handling:
            Exceptions raised by observers are caught and logged. They do
            not propagate to the caller, so one failing renderer doesn't
            break others.
        """
        ...


@runtime_checkable
class Containable(Protocol):
    """A node of a rendered tree used for outside-click detection."""

    def contains(self, target: Any) -> bool:
        """Return True if ``target`` is this node or one of its descendants."""
        ...


@runtime_checkable
class PointerCaptureTarget(Protocol):
    """
    A rendered control that can capture the pointer.

    While captured, move/up/cancel events are delivered to the control even
    when the pointer leaves its bounds.
    """

    def set_pointer_capture(self, pointer_id: int) -> None:
        """Route all events for ``pointer_id`` to this control."""
        ...

    def release_pointer_capture(self, pointer_id: int) -> None:
        """Stop routing events for ``pointer_id`` to this control."""
        ...
