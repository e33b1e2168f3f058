"""Morph transitions: easing, blending and scroll mapping."""

from .easing import EASINGS, ease_cubic_in_out, ease_linear, ease_smoothstep, get_easing
from .interpolate import blend, text_opacity
from .scroll import ScrollPosition, map_scroll_offset, overall_percent, scroll_extent

__all__ = [
    "EASINGS",
    "ScrollPosition",
    "blend",
    "ease_cubic_in_out",
    "ease_linear",
    "ease_smoothstep",
    "get_easing",
    "map_scroll_offset",
    "overall_percent",
    "scroll_extent",
    "text_opacity",
]
