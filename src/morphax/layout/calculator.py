"""Layout calculator: one placement algorithm per :class:`LayoutKind`.

``compute_layout(kind, points, style, params)`` is a pure function.  Every
algorithm returns an ``(n, 2)`` coordinate array in dataset order; the
dispatcher wraps it in a fresh :class:`PositionMap` and clips the bounded
kinds to the inner canvas (RADIAL and BAR may overflow).

Stacked layouts (BAR, HISTOGRAM, DOTPLOT) grow bottom-up from
``inner_height - radius`` in encounter order.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Sequence

import numpy as np
from jaxtyping import Float

from ..data.points import Point, categories, ensure_unique_ids
from ..style.style import StyleParameters
from .binning import assign_bins, bin_edges
from .collision import SimulationConfig, relax
from .kinds import OVERFLOW_KINDS, LayoutKind
from .params import EDITOR_PARAMS, LayoutParams
from .position_map import PositionMap
from .scales import band_scale, linear_scale

logger = logging.getLogger(__name__)

Coordinates = Float[np.ndarray, "n 2"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _values(points: Sequence[Point], name: str) -> np.ndarray:
    return np.array([getattr(p, name) for p in points], dtype=np.float64)


def _x_scale(values: np.ndarray, params: LayoutParams) -> np.ndarray:
    return linear_scale(values, params.value_domain, (0.0, params.inner_width))


def _stack_ranks(keys: Sequence) -> np.ndarray:
    """Rank of each item within its key group, in encounter order."""
    counts: dict = {}
    ranks = np.empty(len(keys), dtype=np.int64)
    for i, key in enumerate(keys):
        ranks[i] = counts.get(key, 0)
        counts[key] = ranks[i] + 1
    return ranks


# ---------------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------------


def _grid(points, radius, params) -> Coordinates:
    n = len(points)
    cols = params.grid_columns
    rows = math.ceil(n / cols)
    # Square cells; shrink when the rows would run off the canvas.
    cell = min(params.inner_width / cols, params.inner_height / rows)
    index = np.arange(n)
    x = (index % cols) * cell + cell / 2
    y = (index // cols) * cell + cell / 2
    return np.stack([x, y], axis=-1)


def _scatter(points, radius, params) -> Coordinates:
    x = _x_scale(_values(points, "value_a"), params)
    y = linear_scale(
        _values(points, "value_b"), params.value_domain, (params.inner_height, 0.0)
    )
    return np.stack([x, y], axis=-1)


def _bar(points, radius, params) -> Coordinates:
    bands = band_scale(categories(points), (0.0, params.inner_width), params.band_padding)
    keys = [p.category for p in points]
    spacing = radius * params.bar_spacing
    x = np.array([bands.center(k) for k in keys])
    y = params.inner_height - _stack_ranks(keys) * spacing - radius
    return np.stack([x, y], axis=-1)


def _radial(points, radius, params) -> Coordinates:
    n = len(points)
    base = min(params.inner_width, params.inner_height) / params.radial_divisor
    angle = 2.0 * np.pi * np.arange(n) / n
    r = base + linear_scale(
        _values(points, "value_a"), params.value_domain, (0.0, params.radial_extent)
    )
    x = params.inner_width / 2 + np.cos(angle) * r
    y = params.inner_height / 2 + np.sin(angle) * r
    return np.stack([x, y], axis=-1)


def _histogram(points, radius, params) -> Coordinates:
    edges = bin_edges(params.value_domain, params.histogram_ticks)
    index = assign_bins(_values(points, "value_a"), edges)
    mids = 0.5 * (edges[:-1] + edges[1:])
    x = _x_scale(mids[index], params)
    y = params.inner_height - radius - _stack_ranks(index.tolist()) * 2 * radius
    return np.stack([x, y], axis=-1)


def _dotplot(points, radius, params) -> Coordinates:
    cell = 2 * radius
    bucket = np.floor(_x_scale(_values(points, "value_a"), params) / cell).astype(np.int64)
    x = bucket * cell + radius
    y = params.inner_height - radius - _stack_ranks(bucket.tolist()) * cell
    return np.stack([x, y], axis=-1)


def _beeswarm(points, radius, params) -> Coordinates:
    n = len(points)
    target = _x_scale(_values(points, "value_a"), params)
    center_y = params.inner_height / 2
    initial = np.stack([target, np.full(n, center_y)], axis=-1)
    config = SimulationConfig(
        strength_x=params.beeswarm_strength_x,
        strength_y=params.beeswarm_strength_y,
    )
    result = relax(
        initial,
        target,
        center_y,
        radius + params.beeswarm_padding,
        params.beeswarm_iterations,
        bounds=(0.0, 0.0, params.inner_width, params.inner_height),
        config=config,
    )
    return result.positions


def _violin(points, radius, params) -> Coordinates:
    bands = band_scale(categories(points), (0.0, params.inner_width), params.band_padding)
    edges = bin_edges(params.value_domain, params.violin_ticks)
    index = assign_bins(_values(points, "value_a"), edges)
    mids = 0.5 * (edges[:-1] + edges[1:])

    keys = [(p.category, int(b)) for p, b in zip(points, index)]
    ranks = _stack_ranks(keys)
    # Sina spread: 0 -> left 1, 1 -> right 1, 2 -> left 2, 3 -> right 2, ...
    side = np.where(ranks % 2 == 0, -1.0, 1.0)
    offset = np.ceil((ranks + 1) / 2) * params.violin_spread * radius

    x = np.array([bands.center(p.category) for p in points]) + side * offset
    y = linear_scale(mids[index], params.value_domain, (params.inner_height, 0.0))
    return np.stack([x, y], axis=-1)


_LAYOUTS: dict[LayoutKind, Callable[[Sequence[Point], float, LayoutParams], Coordinates]] = {
    LayoutKind.GRID: _grid,
    LayoutKind.SCATTER: _scatter,
    LayoutKind.BAR: _bar,
    LayoutKind.RADIAL: _radial,
    LayoutKind.HISTOGRAM: _histogram,
    LayoutKind.DOTPLOT: _dotplot,
    LayoutKind.BEESWARM: _beeswarm,
    LayoutKind.VIOLIN: _violin,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_layout(
    kind: LayoutKind | str,
    points: Sequence[Point],
    style: StyleParameters,
    params: LayoutParams = EDITOR_PARAMS,
) -> PositionMap:
    """Compute the position of every point under *kind*.

    Parameters
    ----------
    kind : LayoutKind or str
        Layout to compute.
    points : sequence of Point
        Dataset in insertion order; ids must be unique.
    style : StyleParameters
        Supplies the point radius (spacing / packing).
    params : LayoutParams
        Canvas and layout constants.

    Returns
    -------
    PositionMap
        One entry per point, in dataset order.

    Raises
    ------
    ValueError
        If *kind* is not a layout kind or ids are not unique.
    """
    kind = LayoutKind.parse(kind)
    points = list(points)
    if not points:
        return PositionMap.empty(kind=kind.value)
    ensure_unique_ids(points)

    n_coerced = sum(1 for p in points if p.is_coerced)
    if n_coerced:
        logger.warning(
            "%s layout: %d of %d points have non-numeric values laid out at 0",
            kind.value, n_coerced, len(points),
        )

    xy = _LAYOUTS[kind](points, style.point_radius, params)
    if kind not in OVERFLOW_KINDS:
        xy = np.clip(xy, 0.0, [params.inner_width, params.inner_height])

    logger.debug("Computed %s layout for %d points", kind.value, len(points))
    return PositionMap(ids=[p.id for p in points], xy=xy, kind=kind.value)
