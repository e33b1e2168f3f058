"""Point style, palettes and colour assignment."""

from .colors import assign_colors, legend_entries, point_colors
from .palettes import DEFAULT_PALETTE, PALETTES, get_palette
from .style import ColorMode, PointShape, StyleParameters

__all__ = [
    "ColorMode",
    "DEFAULT_PALETTE",
    "PALETTES",
    "PointShape",
    "StyleParameters",
    "assign_colors",
    "get_palette",
    "legend_entries",
    "point_colors",
]
