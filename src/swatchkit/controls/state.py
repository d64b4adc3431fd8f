"""Ephemeral per-control interaction state."""

from pydantic import BaseModel


class DragSurfaceState(BaseModel):
    """Drag and focus flags of one control.

    Used only for visual feedback (focus ring, enlarged handle); it has no
    effect on emitted values. Created when a control mounts and reset when
    it unmounts or the pointer is released/cancelled.
    """

    is_dragging: bool = False
    is_focused: bool = False

    def reset(self) -> None:
        """Clear both flags."""
        self.is_dragging = False
        self.is_focused = False

    def css_classes(self) -> list[str]:
        """Class names a renderer can apply for the current state."""
        classes = []
        if self.is_focused:
            classes.append("focused")
        if self.is_dragging:
            classes.append("dragging")
        return classes
