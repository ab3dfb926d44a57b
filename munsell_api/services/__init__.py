"""Services for business logic"""
from .munsell_data import munsell_table
from .palette import generate_palette
from .contrast import compare_colors
from .vision import simulate
from .export import to_css, to_rgb, render_png

__all__ = [
    "munsell_table",
    "generate_palette",
    "compare_colors",
    "simulate",
    "to_css",
    "to_rgb",
    "render_png"
]
