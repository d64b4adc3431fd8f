"""Conversions between RGBA, HSLA, HSV and HEX.

Pure functions without side effects. Every function is total: inputs
outside their nominal range are clamped (hue wraps around) so that
anything the tolerant parser produces converts without raising.

Color spaces:
- RGB: Red, Green, Blue (0-255 each), alpha 0-1
- HSL: Hue (0-360 degrees), Saturation (0-100%), Lightness (0-100%)
- HSV: Hue (0-360 degrees), Saturation (0-100%), Value/Brightness (0-100%)
- HEX: ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA``

Rounding is half-up (``Math.round``) so values agree with browser-side
renderings of the same colors. ``precision`` arguments give the number of
decimals kept for hue/saturation/lightness/value: ``0`` (the default, what
the picker displays) returns whole numbers and ``None`` skips rounding.
"""

import re

from swatchkit.models.color import Hsla, Hsv, Rgba
from swatchkit.models.enums import DisplayFormat
from swatchkit.utils import clamp, round_half_up

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]*$")


def _channel(value: float) -> int:
    """Round and clamp a 0-255 channel."""
    return int(clamp(round_half_up(value), 0, 255))


def _unit(value: float) -> float:
    """Clamp an alpha value to 0-1."""
    return float(clamp(value, 0.0, 1.0))


def _wrap_hue(value: float) -> float:
    """Normalize a hue to [0, 360)."""
    return value % 360


def hex_to_rgba(hex_str: str) -> Rgba:
    """Convert a hex color string to RGBA.

    Supports ``#RGB`` (each nibble doubled), ``#RRGGBB`` and ``#RRGGBBAA``
    with or without the leading ``#``. The alpha byte is mapped from
    0-255 to 0-1 and rounded to 2 decimals. Any other input (wrong length,
    non-hex characters) returns opaque black.

    Example:
        >>> hex_to_rgba("#f50")
        Rgba(r=255, g=85, b=0, a=1.0)
        >>> hex_to_rgba("#ff550080").a
        0.5
    """
    digits = (hex_str or "").strip().removeprefix("#")
    if not _HEX_DIGITS.match(digits):
        return Rgba.black()

    if len(digits) == 3:
        r, g, b = (int(c * 2, 16) for c in digits)
        return Rgba(r=r, g=g, b=b, a=1.0)
    if len(digits) in (6, 8):
        r = int(digits[0:2], 16)
        g = int(digits[2:4], 16)
        b = int(digits[4:6], 16)
        a = 1.0
        if len(digits) == 8:
            a = round_half_up(int(digits[6:8], 16) / 255, 2)
        return Rgba(r=r, g=g, b=b, a=a)

    return Rgba.black()


def rgba_to_hex(r: float, g: float, b: float, a: float = 1.0) -> str:
    """Convert RGBA components to a lowercase hex string.

    The alpha byte is only written when ``a < 1``: fully opaque colors
    always serialize as six digits.

    Example:
        >>> rgba_to_hex(255, 85, 0, 1)
        '#ff5500'
        >>> rgba_to_hex(255, 85, 0, 0.5)
        '#ff550080'
    """
    alpha = ""
    if a < 1:
        alpha = f"{_channel(_unit(a) * 255):02x}"
    return f"#{_channel(r):02x}{_channel(g):02x}{_channel(b):02x}{alpha}"


def rgba_to_hsla(r: float, g: float, b: float, a: float = 1.0, precision: int | None = 0) -> Hsla:
    """Convert RGBA components to HSLA.

    Standard min/max algorithm: lightness is the midpoint of the extreme
    channels, saturation depends on which half of the lightness range the
    color is in, and hue comes from the dominant channel. Achromatic
    colors get ``h = s = 0``.
    """
    rn = clamp(r, 0, 255) / 255
    gn = clamp(g, 0, 255) / 255
    bn = clamp(b, 0, 255) / 255

    high = max(rn, gn, bn)
    low = min(rn, gn, bn)
    lightness = (high + low) / 2

    if high == low:
        hue = saturation = 0.0
    else:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        if high == rn:
            hue = (gn - bn) / delta + (6 if gn < bn else 0)
        elif high == gn:
            hue = (bn - rn) / delta + 2
        else:
            hue = (rn - gn) / delta + 4
        hue /= 6

    return Hsla(
        h=_wrap_hue(round_half_up(hue * 360, precision)),
        s=clamp(round_half_up(saturation * 100, precision), 0, 100),
        l=clamp(round_half_up(lightness * 100, precision), 0, 100),
        a=_unit(a),
    )


def hsla_to_rgba(h: float, s: float, l: float, a: float = 1.0) -> Rgba:  # noqa: E741
    """Convert HSLA components to RGBA.

    Uses the ``k(n)`` / ``f(n)`` formulation (no trigonometry): ``k``
    places each channel on the 12-sector color wheel and ``f`` maps that
    position to the channel intensity.
    """
    hue = _wrap_hue(h)
    sat = clamp(s, 0, 100) / 100
    light = clamp(l, 0, 100) / 100

    def k(n: int) -> float:
        return (n + hue / 30) % 12

    def f(n: int) -> float:
        return light - sat * min(light, 1 - light) * max(-1, min(k(n) - 3, 9 - k(n), 1))

    return Rgba(r=_channel(255 * f(0)), g=_channel(255 * f(8)), b=_channel(255 * f(4)), a=_unit(a))


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert HSV to an 8-bit RGB tuple.

    The hue wheel is split into six 60 degree sectors; each channel
    interpolates between the primary and secondary colors of its sector.
    """
    hue = _wrap_hue(h)
    sat = clamp(s, 0, 100) / 100
    val = clamp(v, 0, 100) / 100

    def f(n: int) -> float:
        k = (n + hue / 60) % 6
        return val - val * sat * max(0, min(k, 4 - k, 1))

    return (_channel(f(5) * 255), _channel(f(3) * 255), _channel(f(1) * 255))


def rgb_to_hsv(r: float, g: float, b: float, precision: int | None = 0) -> Hsv:
    """Convert 8-bit RGB to HSV.

    Value is the largest channel, saturation the channel range relative to
    it, and hue follows from whichever channel is largest.

    Example:
        >>> rgb_to_hsv(255, 85, 0)
        Hsv(h=20.0, s=100.0, v=100.0)
    """
    rn = clamp(r, 0, 255) / 255
    gn = clamp(g, 0, 255) / 255
    bn = clamp(b, 0, 255) / 255

    value = max(rn, gn, bn)
    spread = value - min(rn, gn, bn)

    if spread == 0:
        sector = 0.0
    elif value == rn:
        sector = (gn - bn) / spread
    elif value == gn:
        sector = 2 + (bn - rn) / spread
    else:
        sector = 4 + (rn - gn) / spread

    hue = 60 * (sector + 6 if sector < 0 else sector)
    saturation = (spread / value) * 100 if value else 0.0

    return Hsv(
        h=_wrap_hue(round_half_up(hue, precision)),
        s=clamp(round_half_up(saturation, precision), 0, 100),
        v=clamp(round_half_up(value * 100, precision), 0, 100),
    )


def format_color(rgba: Rgba, fmt: DisplayFormat) -> str:
    """Serialize a color in the given display format.

    HEX gives ``#rrggbb[aa]``, RGB gives ``rgba(r, g, b, a)`` and HSL
    gives ``hsla(h, s%, l%, a)`` with whole-number hue/saturation/lightness.
    """
    if fmt == DisplayFormat.HEX:
        return rgba.to_hex()
    if fmt == DisplayFormat.RGB:
        return rgba.to_css()
    return rgba.to_hsla().to_css()
