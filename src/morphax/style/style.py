"""Point style parameters.

Only ``point_radius`` changes geometry; palette, opacity, colour mode and
shape are presentation-only and never invalidate a cached layout.
"""
from __future__ import annotations

import dataclasses
import math
from enum import Enum
from typing import Sequence

from matplotlib.colors import is_color_like

from .palettes import DEFAULT_PALETTE


class ColorMode(str, Enum):
    """How points are filled."""

    CATEGORY = "CATEGORY"  # palette colour per category
    SINGLE = "SINGLE"  # one base colour for every point


class PointShape(str, Enum):
    """Marker drawn for each point; the renderer maps it to a symbol."""

    CIRCLE = "CIRCLE"
    SQUARE = "SQUARE"
    DIAMOND = "DIAMOND"
    TRIANGLE = "TRIANGLE"
    STAR = "STAR"
    CROSS = "CROSS"


@dataclasses.dataclass(frozen=True)
class StyleParameters:
    """Immutable style settings.

    Parameters
    ----------
    point_radius : float
        Point radius in pixels; must be finite and > 0.
    palette : sequence of str
        Ordered colours (any matplotlib colour spec); must be non-empty.
    opacity : float
        Fill opacity in ``(0, 1]``.
    color_mode : ColorMode
        Category colouring or a single base colour.
    base_color : str
        Fill colour used in ``ColorMode.SINGLE``.
    shape : PointShape
        Marker shape.  Presentation only: layouts always pack by
        ``point_radius``.

    Raises
    ------
    ValueError
        On any invalid field.
    """

    point_radius: float = 8.0
    palette: Sequence[str] = DEFAULT_PALETTE
    opacity: float = 0.8
    color_mode: ColorMode = ColorMode.CATEGORY
    base_color: str = "#FF8F8F"
    shape: PointShape = PointShape.CIRCLE

    def __post_init__(self) -> None:
        radius = float(self.point_radius)
        if not (math.isfinite(radius) and radius > 0):
            raise ValueError(f"point_radius must be finite and > 0, got {self.point_radius!r}")
        object.__setattr__(self, "point_radius", radius)

        palette = tuple(self.palette)
        if not palette:
            raise ValueError("palette must contain at least one colour")
        invalid = [c for c in palette if not is_color_like(c)]
        if invalid:
            raise ValueError(f"Invalid palette colours: {invalid}")
        object.__setattr__(self, "palette", palette)

        if not 0.0 < self.opacity <= 1.0:
            raise ValueError(f"opacity must be in (0, 1], got {self.opacity}")
        if not is_color_like(self.base_color):
            raise ValueError(f"Invalid base_color {self.base_color!r}")
        object.__setattr__(self, "color_mode", ColorMode(self.color_mode))
        object.__setattr__(self, "shape", PointShape(self.shape))

    def geometry_key(self) -> tuple[float, ...]:
        """The style fields that affect layout geometry."""
        return (self.point_radius,)

    def replace(self, **changes) -> "StyleParameters":
        """Return a copy with *changes* applied (re-validated)."""
        return dataclasses.replace(self, **changes)
