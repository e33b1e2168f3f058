"""Canvas geometry and layout constants, with named presets.

Two built-in presets:
- ``EDITOR_PARAMS``: 800x600 canvas, 40 px margins, 10 grid columns.
- ``EXPORT_PARAMS``: 1000x800 canvas, 60 px margins, 12 grid columns and a
  wider radial band.

Tick and iteration counts are tunable constants with reference defaults,
not load-bearing requirements.
"""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Canvas:
    """Logical canvas: outer size and a uniform margin.

    Parameters
    ----------
    width, height : float
        Outer canvas size in pixels.
    margin : float
        Margin on every side; layouts place points in the inner area.
    """

    width: float
    height: float
    margin: float = 0.0

    def __post_init__(self) -> None:
        if self.inner_width <= 0 or self.inner_height <= 0:
            raise ValueError(
                f"Canvas {self.width}x{self.height} with margin {self.margin} "
                "has no inner area"
            )

    @property
    def inner_width(self) -> float:
        """Width available to layouts."""
        return self.width - 2 * self.margin

    @property
    def inner_height(self) -> float:
        """Height available to layouts."""
        return self.height - 2 * self.margin

    @classmethod
    def from_inner(cls, inner_width: float, inner_height: float) -> "Canvas":
        """Canvas with no margin and the given inner size."""
        return cls(width=inner_width, height=inner_height, margin=0.0)


@dataclasses.dataclass(frozen=True)
class LayoutParams:
    """Every tunable constant used by the layout algorithms.

    Parameters
    ----------
    canvas : Canvas
        Target canvas.
    value_domain : tuple[float, float]
        Domain of ``value_a`` / ``value_b``.
    grid_columns : int
        GRID column count.
    band_padding : float
        Inner and outer band padding for BAR and VIOLIN (0--1).
    bar_spacing : float
        BAR vertical spacing, in point radii.
    radial_divisor : float
        RADIAL base radius is ``min(inner_width, inner_height) / radial_divisor``.
    radial_extent : float
        Extra RADIAL radius, in pixels, at the top of the value domain.
    histogram_ticks : int
        Requested threshold count for HISTOGRAM bins.
    violin_ticks : int
        Requested threshold count for VIOLIN bins (coarser than histogram).
    violin_spread : float
        Sina offset step, in point radii.
    beeswarm_iterations : int
        Fixed BEESWARM relaxation tick count.
    beeswarm_padding : float
        Added to the point radius to get the collision radius.
    beeswarm_strength_x, beeswarm_strength_y : float
        Spring strengths toward the target x and the vertical centre.
    """

    canvas: Canvas
    value_domain: tuple[float, float] = (0.0, 100.0)
    grid_columns: int = 10
    band_padding: float = 0.4
    bar_spacing: float = 2.2
    radial_divisor: float = 2.5
    radial_extent: float = 40.0
    histogram_ticks: int = 20
    violin_ticks: int = 10
    violin_spread: float = 1.8
    beeswarm_iterations: int = 120
    beeswarm_padding: float = 1.0
    beeswarm_strength_x: float = 1.0
    beeswarm_strength_y: float = 0.1

    def __post_init__(self) -> None:
        if self.grid_columns < 1:
            raise ValueError(f"grid_columns must be >= 1, got {self.grid_columns}")
        if self.beeswarm_iterations < 0:
            raise ValueError(
                f"beeswarm_iterations must be >= 0, got {self.beeswarm_iterations}"
            )
        if not 0.0 <= self.band_padding < 1.0:
            raise ValueError(f"band_padding must be in [0, 1), got {self.band_padding}")

    @property
    def inner_width(self) -> float:
        return self.canvas.inner_width

    @property
    def inner_height(self) -> float:
        return self.canvas.inner_height

    def replace(self, **changes) -> "LayoutParams":
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

EDITOR_PARAMS = LayoutParams(canvas=Canvas(width=800, height=600, margin=40))
"""Interactive editor canvas."""

EXPORT_PARAMS = LayoutParams(
    canvas=Canvas(width=1000, height=800, margin=60),
    grid_columns=12,
    radial_extent=60.0,
)
"""Standalone export canvas: larger, with a wider radial band."""

_PRESETS: dict[str, LayoutParams] = {
    "editor": EDITOR_PARAMS,
    "export": EXPORT_PARAMS,
}


def get_params(name: str) -> LayoutParams:
    """Look up a named layout preset.

    Parameters
    ----------
    name : str
        ``"editor"`` or ``"export"``.

    Raises
    ------
    ValueError
        If *name* is not a recognized preset.
    """
    try:
        return _PRESETS[name]
    except KeyError:
        available = ", ".join(sorted(_PRESETS))
        raise ValueError(
            f"Unknown layout preset {name!r}. Available presets: {available}"
        ) from None
