"""Input events and geometry for the drag/step controls.

These are renderer-neutral: a front-end translates its own mouse, touch
or key events into ``PointerEvent`` / ``KeyEvent`` and reports the rendered
rectangle of a control as ``Bounds``.
"""

from dataclasses import dataclass
from enum import Enum

from swatchkit.utils import clamp


class Key(str, Enum):
    """Key names understood by the controls and the picker."""

    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    HOME = "Home"
    END = "End"
    ESCAPE = "Escape"
    ENTER = "Enter"
    SPACE = " "


@dataclass(frozen=True, slots=True)
class Bounds:
    """Rendered rectangle of a control, in the same coordinates as pointer events."""

    left: float
    top: float
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        """True when the control has no area (not laid out yet)."""
        return self.width <= 0 or self.height <= 0

    def normalize(self, x: float, y: float) -> tuple[float, float]:
        """Map a point to [0, 1] x [0, 1] relative to this rectangle, clamped."""
        return (
            clamp((x - self.left) / self.width, 0.0, 1.0),
            clamp((y - self.top) / self.height, 0.0, 1.0),
        )


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """A pointer (mouse, touch or pen) position."""

    x: float
    y: float
    pointer_id: int = 1


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """A key press, with the shift modifier state."""

    key: str
    shift: bool = False

    @classmethod
    def parse(cls, combo: str) -> "KeyEvent":
        """Build an event from a ``"shift+ArrowRight"`` style string."""
        shift = False
        key = combo
        if combo.lower().startswith("shift+"):
            shift = True
            key = combo[len("shift+"):]
        return cls(key=key, shift=shift)
