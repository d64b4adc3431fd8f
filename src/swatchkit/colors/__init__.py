"""Color model, conversions and tolerant parsing.

## Representations

The canonical color is ``Rgba`` (8-bit channels, 0-1 alpha). Everything
else is a view computed on demand:

```
  "#ff5500" / "rgba(...)" / "hsla(...)"     external strings
                 │ parse_rgba_components / parse_hsla_components
                 ▼
               Rgba  ◄──────────────►  Hsla    (rgba_to_hsla / hsla_to_rgba)
                 │
                 └──────────────────►  Hsv     (rgb_to_hsv / hsv_to_rgb)
```

HSV drives the 2-D picker surface; HSLA drives the HSL input fields; HEX
is produced with ``rgba_to_hex`` (alpha byte only when ``a < 1``).

## Usage

```python
from swatchkit.colors import parse_color, rgb_to_hsv

rgba = parse_color("#ff5500")        # Rgba(r=255, g=85, b=0, a=1.0)
hsv = rgb_to_hsv(*rgba.to_rgb_tuple())  # Hsv(h=20.0, s=100.0, v=100.0)
```
"""

from .conversions import (
    format_color,
    hex_to_rgba,
    hsla_to_rgba,
    hsv_to_rgb,
    rgb_to_hsv,
    rgba_to_hex,
    rgba_to_hsla,
)
from .parsing import (
    FALLBACK_COLOR,
    HSLA_PATTERN,
    RGBA_PATTERN,
    is_hex_color,
    looks_like_color,
    parse_color,
    parse_hsla_components,
    parse_rgba_components,
    sanitize_color_value,
)
from .presets import DEFAULT_PRESETS, HUE_GRADIENT, alpha_gradient, surface_background

__all__ = [
    "DEFAULT_PRESETS",
    "FALLBACK_COLOR",
    "HSLA_PATTERN",
    "HUE_GRADIENT",
    "RGBA_PATTERN",
    "alpha_gradient",
    "format_color",
    "hex_to_rgba",
    "hsla_to_rgba",
    "hsv_to_rgb",
    "is_hex_color",
    "looks_like_color",
    "parse_color",
    "parse_hsla_components",
    "parse_rgba_components",
    "rgb_to_hsv",
    "rgba_to_hex",
    "rgba_to_hsla",
    "sanitize_color_value",
    "surface_background",
]
