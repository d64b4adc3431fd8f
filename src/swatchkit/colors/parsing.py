"""Tolerant parsing of color strings.

The picker accepts whatever a caller or a half-typed input field holds,
so parsing never raises: each parser tries its own shape first, then
falls back through the other formats, and finally resolves to black.
Malformed input surfaces only as "looks like black".

The direct patterns are deliberately permissive: empty fields are allowed
(``rgba(, 20, 30, 1)`` is what a user clearing the red field produces)
and are kept as empty strings so input fields can show them.
"""

import logging
import re
from typing import Any

from swatchkit.models.color import HslaComponents, Rgba, RgbaComponents
from swatchkit.utils import format_number, parse_float, parse_int

from .conversions import hex_to_rgba, hsla_to_rgba, rgba_to_hsla

logger = logging.getLogger(__name__)

RGBA_PATTERN = re.compile(
    r"rgba?\((\d*),\s*(\d*),\s*(\d*)(?:,\s*([\d.]*))?\)", re.IGNORECASE
)
HSLA_PATTERN = re.compile(
    r"hsla?\((\d*),\s*([\d.]*)%?,\s*([\d.]*)%?(?:,\s*([\d.]*))?\)", re.IGNORECASE
)

# Format sniffing for incoming values (shape only, not full validity)
_HEX_SNIFF = re.compile(r"^#[0-9a-f]{3,8}$", re.IGNORECASE)
_RGB_SNIFF = re.compile(r"^rgba?\s*\(", re.IGNORECASE)
_HSL_SNIFF = re.compile(r"^hsla?\s*\(", re.IGNORECASE)

_COMPLETE_HEX = re.compile(r"^(#?)(?:[0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

FALLBACK_COLOR = "#000000"


def looks_like_color(value: Any) -> bool:
    """Return True if ``value`` has the shape of a hex, rgb() or hsl() color."""
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    return bool(
        _HEX_SNIFF.match(trimmed) or _RGB_SNIFF.match(trimmed) or _HSL_SNIFF.match(trimmed)
    )


def sanitize_color_value(value: Any) -> str:
    """Return ``value`` trimmed if it looks like a color, else ``#000000``.

    Handles ``None``, non-strings and empty strings.
    """
    if not looks_like_color(value):
        return FALLBACK_COLOR
    return value.strip()


def is_hex_color(value: Any, require_hash: bool = True) -> bool:
    """Return True for a complete 3, 6 or 8 digit hex color."""
    if not isinstance(value, str):
        return False
    match = _COMPLETE_HEX.match(value.strip())
    if not match:
        return False
    return bool(match.group(1)) or not require_hash


def parse_rgba_components(text: Any) -> RgbaComponents:
    """Parse a color string into RGBA fields (as text).

    Order of attempts:
    1. ``rgb(...)`` / ``rgba(...)`` directly (alpha defaults to ``"1"``)
    2. ``hsl(...)`` / ``hsla(...)``, converted to RGBA
    3. hex, converted to RGBA
    4. black: ``r="0", g="0", b="0", a="1"``

    Example:
        >>> parse_rgba_components("rgba(10,20,30,0.5)")
        RgbaComponents(r='10', g='20', b='30', a='0.5')
    """
    if not isinstance(text, str):
        return RgbaComponents()

    match = RGBA_PATTERN.search(text)
    if match:
        r, g, b, a = match.groups()
        return RgbaComponents(r=r, g=g, b=b, a="1" if a is None else a)

    prefix = text.strip().lower()

    if prefix.startswith("hsl"):
        hsl_match = HSLA_PATTERN.search(text)
        if hsl_match:
            h, s, l, a = hsl_match.groups()  # noqa: E741
            alpha = parse_float(a, default=1.0) if a else 1.0
            return _rgba_fields(hsla_to_rgba(parse_int(h), parse_int(s), parse_int(l), alpha))

    if prefix.startswith("#"):
        return _rgba_fields(hex_to_rgba(prefix))

    logger.debug(f"Unparseable color {text!r}, using black")
    return RgbaComponents()


def parse_hsla_components(text: Any) -> HslaComponents:
    """Parse a color string into HSLA fields (as text, without ``%``).

    Order of attempts:
    1. ``hsl(...)`` / ``hsla(...)`` directly (alpha defaults to ``"1"``)
    2. hex, converted to HSLA
    3. ``rgb(...)`` / ``rgba(...)``, converted to HSLA
    4. black: ``h="0", s="0", l="0", a="1"``
    """
    if not isinstance(text, str):
        return HslaComponents()

    match = HSLA_PATTERN.search(text)
    if match:
        h, s, l, a = match.groups()  # noqa: E741
        return HslaComponents(h=h, s=s, l=l, a="1" if a is None else a)

    prefix = text.strip().lower()

    if prefix.startswith("#"):
        return _hsla_fields(hex_to_rgba(prefix))

    if prefix.startswith("rgb"):
        return _hsla_fields(parse_rgba_components(text).to_rgba())

    logger.debug(f"Unparseable color {text!r}, using black")
    return HslaComponents()


def parse_color(value: Any) -> Rgba:
    """Parse any supported color string to the canonical color.

    Unrecognised input returns opaque black; this never raises.
    """
    return parse_rgba_components(sanitize_color_value(value)).to_rgba()


def _rgba_fields(rgba: Rgba) -> RgbaComponents:
    return RgbaComponents(
        r=str(rgba.r), g=str(rgba.g), b=str(rgba.b), a=format_number(rgba.a)
    )


def _hsla_fields(rgba: Rgba) -> HslaComponents:
    hsla = rgba_to_hsla(rgba.r, rgba.g, rgba.b, rgba.a)
    return HslaComponents(
        h=format_number(hsla.h),
        s=format_number(hsla.s),
        l=format_number(hsla.l),
        a=format_number(hsla.a),
    )
