"""Built-in preset swatches and CSS background helpers.

The preset list is read-only reference data: pickers copy it, never
mutate it.
"""

from swatchkit.utils import round_half_up

# A curated palette in the style of popular design tools, from neutrals to
# vibrant hues. Duplicates are intentional (the grid is 8 wide).
DEFAULT_PRESETS: tuple[str, ...] = (
    "#000000", "#4D4D4D", "#999999", "#FFFFFF", "#F44E3B", "#FE9200", "#FCDC00",
    "#DBDF00", "#A4DD00", "#68CCCA", "#73D8FF", "#AEA1FF", "#FDA1FF", "#333333",
    "#808080", "#cccccc", "#D33115", "#E27300", "#FCC400", "#B0BC00", "#68BC00",
    "#16A5A5", "#009CE0", "#7B64FF", "#FA28FF", "#000000", "#666666", "#B3B3B3",
    "#9F0500", "#C45100", "#FB9E00", "#808900", "#194D33", "#0C797D", "#0062B1",
    "#653294", "#AB149E",
)

HUE_GRADIENT = (
    "linear-gradient(to right, #f00 0%, #ff0 17%, #0f0 33%, #0ff 50%, "
    "#00f 67%, #f0f 83%, #f00 100%)"
)


def alpha_gradient(r: int, g: int, b: int) -> str:
    """Background for the opacity slider: transparent to the opaque color."""
    return f"linear-gradient(to right, transparent, rgb({r}, {g}, {b}))"


def surface_background(hue: float) -> str:
    """Background of the saturation surface: the hue at full saturation."""
    return f"hsl({round_half_up(hue)}, 100%, 50%)"
