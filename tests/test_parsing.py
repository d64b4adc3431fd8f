"""Tests for tolerant color parsing."""

import pytest

from swatchkit.colors import (
    FALLBACK_COLOR,
    is_hex_color,
    looks_like_color,
    parse_color,
    parse_hsla_components,
    parse_rgba_components,
    sanitize_color_value,
)
from swatchkit.models import HslaComponents, Rgba, RgbaComponents


@pytest.mark.unit
class TestParseRgbaComponents:
    """Test RGBA field parsing."""

    def test_direct_rgba(self):
        assert parse_rgba_components("rgba(10,20,30,0.5)") == RgbaComponents(
            r="10", g="20", b="30", a="0.5"
        )

    def test_rgb_defaults_alpha(self):
        assert parse_rgba_components("rgb(10, 20, 30)") == RgbaComponents(
            r="10", g="20", b="30", a="1"
        )

    def test_empty_fields_are_kept(self):
        components = parse_rgba_components("rgba(, 20, 30, 1)")
        assert components.r == ""
        assert components.to_rgba() == Rgba(r=0, g=20, b=30, a=1.0)

    def test_case_insensitive(self):
        assert parse_rgba_components("RGBA(1, 2, 3, 0.4)").a == "0.4"

    def test_falls_back_to_hsl(self):
        assert parse_rgba_components("hsl(20, 100%, 50%)") == RgbaComponents(
            r="255", g="85", b="0", a="1"
        )

    def test_falls_back_to_hsla_alpha(self):
        assert parse_rgba_components("hsla(20, 100%, 50%, 0.25)").a == "0.25"

    def test_falls_back_to_hex(self):
        assert parse_rgba_components("#ff550080") == RgbaComponents(
            r="255", g="85", b="0", a="0.5"
        )

    @pytest.mark.parametrize("value", ["not-a-color", "", "rgb(", "hsl(nope)", "#xyz"])
    def test_garbage_is_black(self, value):
        assert parse_rgba_components(value) == RgbaComponents(r="0", g="0", b="0", a="1")

    @pytest.mark.parametrize("value", [None, 42, ["#fff"]])
    def test_non_strings_are_black(self, value):
        assert parse_rgba_components(value) == RgbaComponents()


@pytest.mark.unit
class TestParseHslaComponents:
    """Test HSLA field parsing."""

    def test_direct_hsla(self):
        assert parse_hsla_components("hsla(200, 50%, 40%, 0.3)") == HslaComponents(
            h="200", s="50", l="40", a="0.3"
        )

    def test_percent_signs_optional(self):
        assert parse_hsla_components("hsl(200, 50, 40)") == HslaComponents(
            h="200", s="50", l="40", a="1"
        )

    def test_falls_back_to_hex(self):
        assert parse_hsla_components("#ff5500") == HslaComponents(
            h="20", s="100", l="50", a="1"
        )

    def test_falls_back_to_rgb(self):
        assert parse_hsla_components("rgba(255, 0, 0, 0.5)") == HslaComponents(
            h="0", s="100", l="50", a="0.5"
        )

    def test_garbage_is_black(self):
        assert parse_hsla_components("garbage") == HslaComponents(h="0", s="0", l="0", a="1")

    def test_numeric_view_wraps_hue(self):
        hsla = HslaComponents(h="400", s="150", l="50", a="").to_hsla()
        assert (hsla.h, hsla.s, hsla.l, hsla.a) == (40, 100, 50, 1.0)


@pytest.mark.unit
class TestSanitize:
    """Test format sniffing of incoming values."""

    @pytest.mark.parametrize(
        "value",
        ["#fff", "#FF5500", "#ff550080", "rgb(1,2,3)", "rgba (1,2,3,1)", "hsl(1, 2%, 3%)", "HSLA(1,2,3,1)"],
    )
    def test_colors_pass(self, value):
        assert looks_like_color(value)
        assert sanitize_color_value(value) == value

    @pytest.mark.parametrize("value", [None, "", "   ", "blue", "#12", "#123456789", 7])
    def test_others_fall_back(self, value):
        assert sanitize_color_value(value) == FALLBACK_COLOR

    def test_trims_whitespace(self):
        assert sanitize_color_value("  #fff  ") == "#fff"

    def test_parse_color(self):
        assert parse_color("hsla(20, 100%, 50%, 0.5)") == Rgba(r=255, g=85, b=0, a=0.5)
        assert parse_color(None) == Rgba.black()


@pytest.mark.unit
class TestIsHexColor:
    """Test complete-hex detection."""

    @pytest.mark.parametrize("value", ["#abc", "#aabbcc", "#aabbccdd", "#ABC"])
    def test_complete(self, value):
        assert is_hex_color(value)

    @pytest.mark.parametrize("value", ["#", "#a", "#ab", "#abcd", "#abcde", "#abcdefg", "abc", None])
    def test_incomplete(self, value):
        assert not is_hex_color(value)

    def test_hash_optional(self):
        assert is_hex_color("abc", require_hash=False)
