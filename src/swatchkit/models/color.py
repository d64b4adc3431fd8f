"""Color models.

``Rgba`` is the canonical color: every other representation is a view
computed from it on demand. The models are frozen so they can be compared,
hashed and cached freely.
"""

from pydantic import BaseModel, ConfigDict, Field

from swatchkit.utils import clamp, format_number, parse_float, parse_int


class Rgba(BaseModel):
    """Canonical 8-bit RGB color with a 0-1 alpha channel."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")
    a: float = Field(default=1.0, ge=0, le=1, description="Alpha (0-1)")

    @classmethod
    def black(cls) -> "Rgba":
        """Opaque black, the fallback for anything unparseable."""
        return cls(r=0, g=0, b=0, a=1.0)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to a CSS hex string, omitting alpha when fully opaque.

        Example:
            >>> Rgba(r=255, g=85, b=0, a=0.5).to_hex()
            '#ff550080'
        """
        from swatchkit.colors.conversions import rgba_to_hex

        return rgba_to_hex(self.r, self.g, self.b, self.a)

    def to_css(self) -> str:
        """Convert to an ``rgba(r, g, b, a)`` string."""
        return f"rgba({self.r}, {self.g}, {self.b}, {format_number(self.a)})"

    def to_hsla(self, precision: int | None = 0) -> "Hsla":
        """Convert to HSLA (see ``colors.conversions.rgba_to_hsla``)."""
        from swatchkit.colors.conversions import rgba_to_hsla

        return rgba_to_hsla(self.r, self.g, self.b, self.a, precision=precision)

    def to_hsv(self, precision: int | None = 0) -> "Hsv":
        """Convert to HSV, dropping alpha."""
        from swatchkit.colors.conversions import rgb_to_hsv

        return rgb_to_hsv(self.r, self.g, self.b, precision=precision)


class Hsla(BaseModel):
    """Hue (degrees), saturation and lightness (percent) with alpha."""

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0, lt=360, description="Hue (0-360 degrees)")
    s: float = Field(ge=0, le=100, description="Saturation (0-100%)")
    l: float = Field(ge=0, le=100, description="Lightness (0-100%)")  # noqa: E741
    a: float = Field(default=1.0, ge=0, le=1, description="Alpha (0-1)")

    def to_css(self) -> str:
        """Convert to an ``hsla(h, s%, l%, a)`` string."""
        return (
            f"hsla({format_number(self.h)}, {format_number(self.s)}%, "
            f"{format_number(self.l)}%, {format_number(self.a)})"
        )

    def to_rgba(self) -> Rgba:
        """Convert back to the canonical color."""
        from swatchkit.colors.conversions import hsla_to_rgba

        return hsla_to_rgba(self.h, self.s, self.l, self.a)


class Hsv(BaseModel):
    """Hue, saturation and value: the space of the 2-D picker surface.

    Saturation runs horizontally and value (brightness) vertically, which
    separates purity from brightness better than HSL's lightness axis.
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0, lt=360, description="Hue (0-360 degrees)")
    s: float = Field(ge=0, le=100, description="Saturation (0-100%)")
    v: float = Field(ge=0, le=100, description="Value/brightness (0-100%)")

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to an 8-bit RGB tuple."""
        from swatchkit.colors.conversions import hsv_to_rgb

        return hsv_to_rgb(self.h, self.s, self.v)


class RgbaComponents(BaseModel):
    """RGBA fields as text, exactly as they appear in input fields.

    Empty strings are legal (a user clearing a field); numeric views treat
    them as 0 (alpha as 1).
    """

    model_config = ConfigDict(frozen=True)

    r: str = "0"
    g: str = "0"
    b: str = "0"
    a: str = "1"

    def to_rgba(self) -> Rgba:
        """Numeric view, with empty/invalid fields defaulted and clamped."""
        return Rgba(
            r=clamp(parse_int(self.r), 0, 255),
            g=clamp(parse_int(self.g), 0, 255),
            b=clamp(parse_int(self.b), 0, 255),
            a=clamp(parse_float(self.a, default=1.0), 0.0, 1.0),
        )

    @property
    def alpha(self) -> float:
        """Alpha as a number (1.0 when empty or unparseable)."""
        return clamp(parse_float(self.a, default=1.0), 0.0, 1.0)


class HslaComponents(BaseModel):
    """HSLA fields as text (percent signs stripped)."""

    model_config = ConfigDict(frozen=True)

    h: str = "0"
    s: str = "0"
    l: str = "0"  # noqa: E741
    a: str = "1"

    def to_hsla(self) -> Hsla:
        """Numeric view, with empty/invalid fields defaulted and clamped."""
        return Hsla(
            h=parse_int(self.h) % 360,
            s=clamp(parse_int(self.s), 0, 100),
            l=clamp(parse_int(self.l), 0, 100),
            a=clamp(parse_float(self.a, default=1.0), 0.0, 1.0),
        )
