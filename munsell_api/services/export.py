"""Color set export: JSON, CSS custom properties and PNG swatches"""
import io
import numpy as np
from PIL import Image
from typing import List, Optional, Sequence, Tuple
from munsell_api.core.config import get_settings
from . import color_math

settings = get_settings()


def to_css(colors: Sequence[str]) -> str:
    """One custom property per color, 1-indexed, inside :root"""
    declarations = "\n".join(
        f"--color-{i}: {color};" for i, color in enumerate(colors, start=1)
    )
    return f":root {{\n{declarations}\n}}"


def to_rgb(color: str) -> Tuple[int, int, int]:
    """
    Parse a color string into 8-bit sRGB channels

    Raises:
        ValueError: if the string is not a valid color
    """
    parsed = color_math.parse_color(color)
    if parsed is None:
        raise ValueError(f"Invalid color: {color!r}")
    hex_value = color_math.to_hex(parsed)
    return tuple(int(hex_value[i:i + 2], 16) for i in (1, 3, 5))


def render_png(rgb_colors: List[Tuple[int, int, int]], swatch_size: Optional[int] = None) -> bytes:
    """
    Rasterize swatches left to right into a PNG

    Args:
        rgb_colors: 8-bit RGB triples in display order
        swatch_size: Edge length of each square swatch in px

    Returns:
        Encoded PNG bytes, width = swatch_size * len(colors), height = swatch_size
    """
    size = swatch_size or settings.swatch_size
    canvas = np.full((size, size * len(rgb_colors), 4), 255, dtype=np.uint8)

    for i, (r, g, b) in enumerate(rgb_colors):
        canvas[:, i * size:(i + 1) * size] = (r, g, b, 255)

    buffer = io.BytesIO()
    Image.fromarray(canvas).save(buffer, format="PNG")
    return buffer.getvalue()
