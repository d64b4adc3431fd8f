"""Pointer-drag and keyboard-step controls.

Two controls share one interaction contract (``DragControl``):

- ``SaturationSurface``: 2-D area mapping x to saturation and y to value
- ``Slider``: 1-D track mapping x to ``[0, max]`` (hue and alpha)

Controls are controlled: the owner writes the current value into them
after every change and receives new values through ``on_change``. Every
emitted value is clamped to the control's range.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from swatchkit.protocols import PointerCaptureTarget
from swatchkit.utils import clamp, round_half_up

from .events import Bounds, Key, KeyEvent, PointerEvent
from .state import DragSurfaceState

logger = logging.getLogger(__name__)

BoundsProvider = Callable[[], Bounds | None]


class DragControl(ABC):
    """
    Shared pointer-capture and focus behavior.

    Pointer flow:
        down  -> capture, start dragging, emit for the down position
        move  -> emit only while dragging
        up / cancel -> stop dragging, release capture

    Bounds are measured on every pointer event so a moved or resized
    control maps positions correctly. When no bounds are available (not
    rendered yet) pointer events are ignored.
    """

    def __init__(
        self,
        measure: BoundsProvider | None = None,
        capture_target: PointerCaptureTarget | None = None,
    ) -> None:
        """
        Initialize the control.

        Args:
            measure: Returns the current rendered rectangle, or None
            capture_target: Rendered node that can capture the pointer
        """
        self._measure = measure
        self._capture_target = capture_target
        self._captured_pointer: int | None = None
        self.state = DragSurfaceState()

    def attach(
        self,
        measure: BoundsProvider,
        capture_target: PointerCaptureTarget | None = None,
    ) -> None:
        """Bind the control to its rendered node once it is mounted."""
        self._measure = measure
        self._capture_target = capture_target

    @property
    def is_dragging(self) -> bool:
        return self.state.is_dragging

    @property
    def is_focused(self) -> bool:
        return self.state.is_focused

    # ------------------------------------------------------------------
    # Pointer
    # ------------------------------------------------------------------

    def pointer_down(self, event: PointerEvent) -> None:
        """Start a drag at ``event`` and emit the value under the pointer."""
        self._capture(event.pointer_id)
        self.state.is_dragging = True
        self._update_from_pointer(event)

    def pointer_move(self, event: PointerEvent) -> None:
        """Emit the value under the pointer while dragging."""
        if not self.state.is_dragging:
            return
        self._update_from_pointer(event)

    def pointer_up(self, event: PointerEvent) -> None:
        """End the drag."""
        self._end_drag(event.pointer_id)

    def pointer_cancel(self, event: PointerEvent) -> None:
        """Abort the drag (same as ``pointer_up`` but nothing is emitted)."""
        self._end_drag(event.pointer_id)

    def _end_drag(self, pointer_id: int) -> None:
        self.state.is_dragging = False
        self._release(pointer_id)

    def _capture(self, pointer_id: int) -> None:
        if self._capture_target is None:
            return
        self._capture_target.set_pointer_capture(pointer_id)
        self._captured_pointer = pointer_id

    def _release(self, pointer_id: int) -> None:
        if self._capture_target is None or self._captured_pointer != pointer_id:
            return
        self._capture_target.release_pointer_capture(pointer_id)
        self._captured_pointer = None

    def _update_from_pointer(self, event: PointerEvent) -> None:
        bounds = self._measure() if self._measure is not None else None
        if bounds is None or bounds.is_empty:
            logger.debug(f"{type(self).__name__}: no bounds, ignoring pointer")
            return
        x, y = bounds.normalize(event.x, event.y)
        self._apply_position(x, y)

    @abstractmethod
    def _apply_position(self, x: float, y: float) -> None:
        """Emit for a normalized position in [0, 1] x [0, 1]."""

    # ------------------------------------------------------------------
    # Focus and keyboard
    # ------------------------------------------------------------------

    def focus(self) -> None:
        self.state.is_focused = True

    def blur(self) -> None:
        self.state.is_focused = False

    @abstractmethod
    def key_down(self, event: KeyEvent) -> bool:
        """
        Handle a key press.

        Returns:
            True if the key was handled (the caller should suppress its
            default action), False otherwise.
        """

    def unmount(self) -> None:
        """Release any held capture and drop interaction state."""
        if self._captured_pointer is not None:
            self._release(self._captured_pointer)
        self.state.reset()


class SaturationSurface(DragControl):
    """
    2-D saturation/value surface.

    Left edge is saturation 0, right edge 100. Top edge is value 100,
    bottom edge 0. Arrow keys step by 1 (10 with shift); left/right change
    saturation, up/down change value.
    """

    STEP = 1.0
    LARGE_STEP = 10.0

    def __init__(
        self,
        on_change: Callable[[float, float], None],
        measure: BoundsProvider | None = None,
        capture_target: PointerCaptureTarget | None = None,
        s: float = 0.0,
        v: float = 0.0,
    ) -> None:
        super().__init__(measure, capture_target)
        self._on_change = on_change
        self.s = s
        self.v = v

    def _emit(self, s: float, v: float) -> None:
        self.s = clamp(s, 0.0, 100.0)
        self.v = clamp(v, 0.0, 100.0)
        self._on_change(self.s, self.v)

    def _apply_position(self, x: float, y: float) -> None:
        self._emit(x * 100, (1 - y) * 100)

    def key_down(self, event: KeyEvent) -> bool:
        step = self.LARGE_STEP if event.shift else self.STEP
        s, v = self.s, self.v
        match event.key:
            case Key.ARROW_LEFT:
                s -= step
            case Key.ARROW_RIGHT:
                s += step
            case Key.ARROW_UP:
                v += step
            case Key.ARROW_DOWN:
                v -= step
            case Key.PAGE_UP:
                v += self.LARGE_STEP
            case Key.PAGE_DOWN:
                v -= self.LARGE_STEP
            case Key.HOME:
                s, v = 0.0, 100.0
            case Key.END:
                s, v = 100.0, 0.0
            case _:
                return False
        self._emit(s, v)
        return True

    @property
    def handle_position(self) -> tuple[float, float]:
        """Handle position as (left %, top %) of the surface."""
        return self.s, 100 - self.v

    @property
    def value_text(self) -> str:
        """Accessible description of the current position."""
        return (
            f"Saturation {round_half_up(self.s)}%, "
            f"Brightness {round_half_up(self.v)}%"
        )


class Slider(DragControl):
    """
    Horizontal slider over ``[0, max]``.

    Left/down decrease and right/up increase by 1% of max (10% with
    shift). Page keys step by 10% of max, Home/End jump to the ends.
    """

    def __init__(
        self,
        on_change: Callable[[float], None],
        measure: BoundsProvider | None = None,
        capture_target: PointerCaptureTarget | None = None,
        value: float = 0.0,
        max: float = 100.0,
        label: str = "",
    ) -> None:
        if max <= 0:
            raise ValueError(f"Slider max must be positive, got {max}")
        super().__init__(measure, capture_target)
        self._on_change = on_change
        self.max = max
        self.value = value
        self.label = label

    @property
    def step(self) -> float:
        return self.max * 0.01

    @property
    def large_step(self) -> float:
        return self.max * 0.1

    def _emit(self, value: float) -> None:
        self.value = clamp(value, 0.0, self.max)
        self._on_change(self.value)

    def _apply_position(self, x: float, y: float) -> None:
        self._emit(x * self.max)

    def key_down(self, event: KeyEvent) -> bool:
        step = self.large_step if event.shift else self.step
        match event.key:
            case Key.ARROW_LEFT | Key.ARROW_DOWN:
                new_value = self.value - step
            case Key.ARROW_RIGHT | Key.ARROW_UP:
                new_value = self.value + step
            case Key.PAGE_UP:
                new_value = self.value + self.large_step
            case Key.PAGE_DOWN:
                new_value = self.value - self.large_step
            case Key.HOME:
                new_value = 0.0
            case Key.END:
                new_value = self.max
            case _:
                return False
        self._emit(new_value)
        return True

    @property
    def percentage(self) -> int:
        """Current value as an integer percentage of max."""
        return round_half_up(self.value / self.max * 100)

    @property
    def handle_position(self) -> float:
        """Handle position as left % of the track."""
        return clamp(self.value / self.max * 100, 0.0, 100.0)

    @property
    def value_text(self) -> str:
        return f"{self.percentage}%"
