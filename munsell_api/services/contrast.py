"""WCAG contrast comparison"""
from coloraide import Color
from munsell_api.models.schemas import ComparisonResult
from . import color_math

# (minimum ratio, rating), checked top down
WCAG_LEVELS = (
    (7.0, "AAA"),
    (4.5, "AA"),
    (3.0, "AA (Large Text)"),
)


def contrast_ratio(color_a: Color, color_b: Color) -> float:
    """WCAG 2.1 luminance contrast ratio, 1 to 21"""
    return color_a.contrast(color_b, method="wcag21")


def wcag_rating(ratio: float) -> str:
    for minimum, rating in WCAG_LEVELS:
        if ratio >= minimum:
            return rating
    return "Fail"


def compare_colors(color_a: Color, color_b: Color) -> ComparisonResult:
    """
    Compare two parsed colors

    Returns:
        Contrast ratio as "X.XX:1", absolute HSL hue difference and WCAG rating
    """
    ratio = contrast_ratio(color_a, color_b)
    hue_diff = abs(color_math.hue(color_a) - color_math.hue(color_b))

    return ComparisonResult(
        contrastRatio=f"{ratio:.2f}:1",
        colorDifference=f"{hue_diff:.1f}",
        wcagRating=wcag_rating(ratio)
    )
