"""Color manipulation helpers on top of coloraide"""
import math
import re
from typing import Any, List, Optional
from coloraide import Color

# hex digits without the leading "#", as tinycolor accepts them
BARE_HEX_RE = re.compile(r"^(?:[0-9A-Fa-f]{3,4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def parse_color(value: Any) -> Optional[Color]:
    """
    Parse any CSS color string

    Args:
        value: Color string (hex with or without "#", named, rgb(), hsl(), ...)

    Returns:
        Parsed color or None if the value is not a valid color
    """
    if not isinstance(value, str) or not value.strip():
        return None
    value = value.strip()
    if BARE_HEX_RE.match(value):
        value = "#" + value
    try:
        return Color(value)
    except ValueError:
        return None


def to_hex(color: Color) -> str:
    """Lowercase #rrggbb, gamut mapped to sRGB"""
    return color.convert("srgb").to_string(hex=True, alpha=False)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def brighten(color: Color, amount: float = 10) -> Color:
    """Shift every sRGB channel up by amount% of the full range"""
    step = amount / 100
    rgb = color.convert("srgb")
    for channel in ("red", "green", "blue"):
        rgb.set(channel, lambda v: _clamp(v + step))
    return rgb


def darken(color: Color, amount: float = 10) -> Color:
    """Lower HSL lightness by amount%"""
    step = amount / 100
    return color.convert("hsl").set("lightness", lambda v: _clamp(v - step))


def complement(color: Color) -> Color:
    """Opposite hue on the HSL wheel"""
    return color.harmony("complement", space="hsl")[-1]


def rotate_hue(color: Color, degrees: float) -> Color:
    return color.convert("hsl").set("hue", lambda h: (h + degrees) % 360)


def analogous(color: Color, results: int = 6, slices: int = 30) -> List[Color]:
    """
    Base color followed by neighbours on the HSL wheel

    The wheel is cut into `slices` parts; the neighbours walk from
    (results // 2 - 1) parts below the base hue upwards, one part at a time.
    """
    part = 360 / slices
    start = -part * (results // 2)
    return [color] + [rotate_hue(color, start + part * i) for i in range(1, results)]


def triad(color: Color) -> List[Color]:
    return color.harmony("triad", space="hsl")


def tetrad(color: Color) -> List[Color]:
    return color.harmony("square", space="hsl")


def random_color() -> Color:
    return Color.random("srgb")


def hue(color: Color) -> float:
    """HSL hue in degrees, 0 for achromatic colors"""
    h = color.convert("srgb").fit().convert("hsl").get("hue")
    return 0.0 if math.isnan(h) else h
