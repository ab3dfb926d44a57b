"""Palette generation from color harmony rules"""
from typing import Callable, Dict, List
from coloraide import Color
from munsell_api.core.config import get_settings
from munsell_api.models.schemas import HarmonyType
from . import color_math
from .color_math import to_hex

settings = get_settings()


def _monochromatic(base: Color) -> List[str]:
    return [
        to_hex(base),
        to_hex(color_math.brighten(base, 20)),
        to_hex(color_math.darken(base, 20)),
        to_hex(color_math.brighten(base, 40)),
        to_hex(color_math.darken(base, 40)),
    ]


def _analogous(base: Color) -> List[str]:
    return [to_hex(c) for c in color_math.analogous(base)]


def _complementary(base: Color) -> List[str]:
    return [
        to_hex(base),
        to_hex(color_math.complement(base)),
        to_hex(color_math.complement(color_math.brighten(base, 10))),
        to_hex(color_math.complement(color_math.darken(base, 10))),
    ]


def _triadic(base: Color) -> List[str]:
    return [to_hex(c) for c in color_math.triad(base)]


def _tetradic(base: Color) -> List[str]:
    return [to_hex(c) for c in color_math.tetrad(base)]


def _random(base: Color) -> List[str]:
    palette = [to_hex(base)]
    for _ in range(settings.random_palette_size):
        palette.append(to_hex(color_math.random_color()))
    return palette


_BUILDERS: Dict[HarmonyType, Callable[[Color], List[str]]] = {
    HarmonyType.MONOCHROMATIC: _monochromatic,
    HarmonyType.ANALOGOUS: _analogous,
    HarmonyType.COMPLEMENTARY: _complementary,
    HarmonyType.TRIADIC: _triadic,
    HarmonyType.TETRADIC: _tetradic,
    HarmonyType.RANDOM: _random,
}


def generate_palette(harmony: HarmonyType, base: Color) -> List[str]:
    """
    Build a palette around a base color

    Args:
        harmony: Harmony rule
        base: Parsed base color

    Returns:
        Hex colors, base first unless the harmony rule supplies its own set
    """
    return _BUILDERS[harmony](base)
