"""Derivation of every displayed representation from the external value.

The external color string is the only stored state. Everything a picker
shows is recomputed from it:

    value -> sanitized value -> RGBA -> HSV (surface, hue slider)
                                     -> HSLA (HSL fields)
                                     -> hex (HEX field, swatch)

Recomputation is O(1) so no caching layer is kept.
"""

from pydantic import BaseModel, ConfigDict

from swatchkit.colors.conversions import format_color, rgba_to_hex
from swatchkit.colors.parsing import (
    parse_hsla_components,
    parse_rgba_components,
    sanitize_color_value,
)
from swatchkit.colors.presets import alpha_gradient, surface_background
from swatchkit.models import DisplayFormat, Hsla, HslaComponents, Hsv, Rgba, RgbaComponents


class ColorView(BaseModel):
    """Snapshot of all derived representations of one color string."""

    model_config = ConfigDict(frozen=True)

    value: str
    rgba_components: RgbaComponents
    hsla_components: HslaComponents
    rgba: Rgba
    hsla: Hsla
    hsv: Hsv
    hex: str

    @classmethod
    def derive(cls, value: object) -> "ColorView":
        """Build the view for any external value (never raises).

        Args:
            value: External color string; None, empty or malformed values
                render as opaque black

        Example:
            >>> ColorView.derive("#ff5500").hsv
            Hsv(h=20.0, s=100.0, v=100.0)
        """
        safe_value = sanitize_color_value(value)
        rgba_components = parse_rgba_components(safe_value)
        hsla_components = parse_hsla_components(safe_value)
        rgba = rgba_components.to_rgba()
        return cls(
            value=safe_value,
            rgba_components=rgba_components,
            hsla_components=hsla_components,
            rgba=rgba,
            hsla=hsla_components.to_hsla(),
            hsv=rgba.to_hsv(),
            hex=rgba_to_hex(rgba.r, rgba.g, rgba.b, rgba.a),
        )

    def format(self, fmt: DisplayFormat) -> str:
        """The current color serialized in ``fmt``."""
        return format_color(self.rgba, fmt)

    @property
    def surface_background(self) -> str:
        return surface_background(self.hsv.h)

    @property
    def alpha_background(self) -> str:
        return alpha_gradient(self.rgba.r, self.rgba.g, self.rgba.b)
