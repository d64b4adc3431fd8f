"""Tests for the drag/step controls."""

from unittest.mock import Mock

import pytest

from swatchkit.controls import (
    Bounds,
    DragControl,
    DragSurfaceState,
    Key,
    KeyEvent,
    PointerEvent,
    SaturationSurface,
    Slider,
)


@pytest.fixture
def surface(square_bounds, capture_target, on_change):
    """Surface at s=50, v=50 over a 100x100 area."""
    return SaturationSurface(
        on_change, lambda: square_bounds, capture_target, s=50, v=50
    )


@pytest.fixture
def hue_slider(on_change):
    """Hue slider over a 100 cell track."""
    return Slider(on_change, lambda: Bounds(0, 0, 100, 1), max=360, value=0)


@pytest.mark.unit
class TestBounds:
    """Test bounds normalization."""

    def test_normalize_inside(self):
        bounds = Bounds(left=10, top=20, width=200, height=100)
        assert bounds.normalize(110, 70) == (0.5, 0.5)

    def test_normalize_clamps(self):
        bounds = Bounds(left=10, top=20, width=200, height=100)
        assert bounds.normalize(-50, -50) == (0.0, 0.0)
        assert bounds.normalize(999, 999) == (1.0, 1.0)

    def test_empty(self):
        assert Bounds(0, 0, 0, 10).is_empty
        assert not Bounds(0, 0, 1, 1).is_empty


@pytest.mark.unit
class TestKeyEvent:
    """Test key event parsing."""

    def test_parse_shift(self):
        assert KeyEvent.parse("shift+ArrowRight") == KeyEvent(key="ArrowRight", shift=True)

    def test_parse_plain(self):
        assert KeyEvent.parse("Home") == KeyEvent(key="Home")

    def test_key_names_compare_as_strings(self):
        assert Key.ARROW_LEFT == "ArrowLeft"


@pytest.mark.unit
class TestSurfacePointer:
    """Test pointer handling on the 2-D surface."""

    def test_pointer_down_emits_position(self, surface, on_change):
        surface.pointer_down(PointerEvent(25, 75))
        on_change.assert_called_once_with(25.0, 25.0)
        assert surface.is_dragging

    def test_above_left_clamps_to_white_corner(self, surface, on_change):
        surface.pointer_down(PointerEvent(-40, -40))
        on_change.assert_called_once_with(0.0, 100.0)

    def test_below_right_clamps_to_black_corner(self, surface, on_change):
        surface.pointer_down(PointerEvent(400, 400))
        on_change.assert_called_once_with(100.0, 0.0)

    def test_move_only_while_dragging(self, surface, on_change):
        surface.pointer_move(PointerEvent(10, 10))
        on_change.assert_not_called()

        surface.pointer_down(PointerEvent(10, 10))
        surface.pointer_move(PointerEvent(300, 50))
        assert on_change.call_args_list[-1].args == (100.0, 50.0)

        surface.pointer_up(PointerEvent(300, 50))
        on_change.reset_mock()
        surface.pointer_move(PointerEvent(20, 20))
        on_change.assert_not_called()

    def test_capture_before_first_emission(self, square_bounds, capture_target):
        def check_captured(s, v):
            capture_target.set_pointer_capture.assert_called_once_with(7)

        surface = SaturationSurface(check_captured, lambda: square_bounds, capture_target)
        surface.pointer_down(PointerEvent(50, 50, pointer_id=7))

    def test_release_on_up(self, surface, capture_target):
        surface.pointer_down(PointerEvent(50, 50, pointer_id=3))
        surface.pointer_up(PointerEvent(500, 500, pointer_id=3))

        capture_target.release_pointer_capture.assert_called_once_with(3)
        assert not surface.is_dragging

    def test_release_on_cancel(self, surface, capture_target, on_change):
        surface.pointer_down(PointerEvent(50, 50))
        on_change.reset_mock()
        surface.pointer_cancel(PointerEvent(50, 50))

        capture_target.release_pointer_capture.assert_called_once_with(1)
        on_change.assert_not_called()
        assert not surface.is_dragging

    def test_no_bounds_ignores_pointer(self, on_change):
        surface = SaturationSurface(on_change)
        surface.pointer_down(PointerEvent(10, 10))
        on_change.assert_not_called()

    def test_attach_later(self, on_change, square_bounds):
        surface = SaturationSurface(on_change)
        surface.attach(lambda: square_bounds)
        surface.pointer_down(PointerEvent(100, 0))
        on_change.assert_called_once_with(100.0, 100.0)

    def test_unmount_releases_capture(self, surface, capture_target):
        surface.focus()
        surface.pointer_down(PointerEvent(50, 50, pointer_id=2))
        surface.unmount()

        capture_target.release_pointer_capture.assert_called_once_with(2)
        assert not surface.is_dragging
        assert not surface.is_focused


@pytest.mark.unit
class TestSurfaceKeyboard:
    """Test keyboard steps on the 2-D surface."""

    @pytest.mark.parametrize(
        "key,shift,expected",
        [
            (Key.ARROW_LEFT, False, (49, 50)),
            (Key.ARROW_RIGHT, False, (51, 50)),
            (Key.ARROW_UP, False, (50, 51)),
            (Key.ARROW_DOWN, False, (50, 49)),
            (Key.ARROW_LEFT, True, (40, 50)),
            (Key.ARROW_UP, True, (50, 60)),
            (Key.PAGE_UP, False, (50, 60)),
            (Key.PAGE_DOWN, False, (50, 40)),
            (Key.HOME, False, (0, 100)),
            (Key.END, False, (100, 0)),
        ],
    )
    def test_keys(self, surface, on_change, key, shift, expected):
        assert surface.key_down(KeyEvent(key=key, shift=shift))
        on_change.assert_called_once_with(*expected)

    def test_steps_clamp(self, on_change):
        surface = SaturationSurface(on_change, s=95, v=3)
        surface.key_down(KeyEvent(Key.ARROW_RIGHT, shift=True))
        surface.key_down(KeyEvent(Key.ARROW_DOWN, shift=True))
        assert on_change.call_args_list[-1].args == (100, 0)

    def test_unhandled_key(self, surface, on_change):
        assert not surface.key_down(KeyEvent("a"))
        on_change.assert_not_called()

    def test_value_text(self):
        surface = SaturationSurface(Mock(), s=33.4, v=66.5)
        assert surface.value_text == "Saturation 33%, Brightness 67%"
        assert surface.handle_position == (33.4, 33.5)


@pytest.mark.unit
class TestSlider:
    """Test the 1-D slider."""

    def test_shift_arrow_is_ten_percent(self, hue_slider, on_change):
        hue_slider.key_down(KeyEvent(Key.ARROW_RIGHT, shift=True))
        on_change.assert_called_once_with(36.0)

    def test_arrow_is_one_percent(self, hue_slider, on_change):
        hue_slider.value = 100
        hue_slider.key_down(KeyEvent(Key.ARROW_DOWN))
        on_change.assert_called_once_with(pytest.approx(96.4))

    def test_home_end(self, hue_slider, on_change):
        hue_slider.value = 180
        hue_slider.key_down(KeyEvent(Key.HOME))
        hue_slider.key_down(KeyEvent(Key.END))
        assert [c.args[0] for c in on_change.call_args_list] == [0, 360]

    def test_page_keys(self, hue_slider, on_change):
        hue_slider.key_down(KeyEvent(Key.PAGE_UP))
        hue_slider.key_down(KeyEvent(Key.PAGE_DOWN))
        assert [c.args[0] for c in on_change.call_args_list] == [36, 0]

    def test_clamps_at_ends(self, hue_slider, on_change):
        hue_slider.key_down(KeyEvent(Key.ARROW_LEFT))
        on_change.assert_called_once_with(0.0)

        hue_slider.value = 359
        hue_slider.key_down(KeyEvent(Key.ARROW_UP, shift=True))
        assert on_change.call_args.args == (360,)

    def test_pointer(self, hue_slider, on_change):
        hue_slider.pointer_down(PointerEvent(25, 0))
        hue_slider.pointer_move(PointerEvent(-10, 5))
        hue_slider.pointer_move(PointerEvent(150, 5))
        assert [c.args[0] for c in on_change.call_args_list] == [90, 0, 360]

    def test_alpha_steps(self, on_change):
        slider = Slider(on_change, max=1, value=0.5)
        slider.key_down(KeyEvent(Key.ARROW_LEFT))
        assert on_change.call_args.args[0] == pytest.approx(0.49)

    def test_value_text(self):
        slider = Slider(Mock(), max=1, value=0.456)
        assert slider.value_text == "46%"
        assert slider.percentage == 46
        assert slider.handle_position == pytest.approx(45.6)

    def test_invalid_max(self):
        with pytest.raises(ValueError):
            Slider(Mock(), max=0)


@pytest.mark.unit
class TestDragSurfaceState:
    """Test interaction flags."""

    def test_focus_and_drag_classes(self, surface):
        surface.focus()
        surface.pointer_down(PointerEvent(1, 1))
        assert surface.state.css_classes() == ["focused", "dragging"]

        surface.blur()
        surface.pointer_up(PointerEvent(1, 1))
        assert surface.state.css_classes() == []

    def test_reset(self):
        state = DragSurfaceState(is_dragging=True, is_focused=True)
        state.reset()
        assert not state.is_dragging
        assert not state.is_focused


@pytest.mark.unit
class TestDragControlBase:
    """Test the shared base contract."""

    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            DragControl(measure=lambda: Bounds(0, 0, 10, 10))

    def test_subclass_must_handle_keys(self):
        class PositionOnly(DragControl):
            def _apply_position(self, x, y):
                pass

        with pytest.raises(TypeError):
            PositionOnly()

    def test_subclass_receives_normalized_position(self, capture_target):
        positions = []

        class Recorder(DragControl):
            def _apply_position(self, x, y):
                positions.append((x, y))

            def key_down(self, event):
                return False

        control = Recorder(lambda: Bounds(0, 0, 10, 10), capture_target)
        control.pointer_down(PointerEvent(5, 5))

        assert positions == [(0.5, 0.5)]
        capture_target.set_pointer_capture.assert_called_once_with(1)
