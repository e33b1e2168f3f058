"""Blend two position maps by an eased progress value.

Points are joined by id.  A point present in both maps moves along the
straight line between its two positions; a point present in only one map
holds that position for the whole transition.  An eased value of exactly
0 or 1 returns the start or end coordinates unchanged, so
``blend(S, E, 0) == S`` and ``blend(S, E, 1) == E`` hold bit-for-bit.

Blending is cheap (one vectorised lerp) and is meant to run on every
progress update; layouts themselves should come from a cache.
"""
from __future__ import annotations

from typing import Callable

import numpy as np

from ..layout.position_map import PositionMap
from .easing import ease_cubic_in_out


def _aligned(start: PositionMap, end: PositionMap):
    """Union ids and start/end coordinate arrays aligned to them."""
    if start.ids == end.ids:
        return start.ids, start.xy, end.xy

    start_rows = start.index_of()
    end_rows = end.index_of()
    ids = list(start.ids) + [i for i in end.ids if i not in start_rows]

    src = np.empty((len(ids), 2))
    dst = np.empty((len(ids), 2))
    for row, point_id in enumerate(ids):
        s = start_rows.get(point_id)
        e = end_rows.get(point_id)
        src[row] = start.xy[s] if s is not None else end.xy[e]
        dst[row] = end.xy[e] if e is not None else start.xy[s]
    return tuple(ids), src, dst


def blend(
    start: PositionMap,
    end: PositionMap,
    progress: float,
    easing: Callable[[float], float] = ease_cubic_in_out,
) -> PositionMap:
    """Interpolated positions at *progress* between *start* and *end*.

    Parameters
    ----------
    start, end : PositionMap
        Layout snapshots of the current and the next step.
    progress : float
        Local progress; clamped to ``[0, 1]`` (NaN counts as 0).
    easing : callable
        Monotonic easing with ``easing(0) == 0`` and ``easing(1) == 1``.

    Returns
    -------
    PositionMap
        Union of both id sets: start order first, then end-only ids.
    """
    ids, src, dst = _aligned(start, end)
    p = float(progress)
    p = 0.0 if np.isnan(p) else min(max(p, 0.0), 1.0)
    eased = float(easing(p))

    if eased <= 0.0:
        xy = src
    elif eased >= 1.0:
        xy = dst
    else:
        xy = src + (dst - src) * eased
    return PositionMap(ids=ids, xy=xy)


def text_opacity(progress: float) -> float:
    """Narrative overlay opacity: ``min(|progress - 0.5| * 3, 1)``.

    1 at both ends of a transition, 0 at its midpoint, so the outgoing text
    fades out and the incoming text fades in.  Progress is clamped to
    ``[0, 1]`` like in :func:`blend` (NaN counts as 0).
    """
    p = float(progress)
    p = 0.0 if np.isnan(p) else min(max(p, 0.0), 1.0)
    return min(abs(p - 0.5) * 3.0, 1.0)
