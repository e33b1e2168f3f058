"""Binning along a bounded numeric axis.

Thresholds are "nice" ticks over the domain (step of 1, 2, 5 or 10 times a
power of ten, chosen exactly as d3's ``ticks``), keeping only the ticks
strictly inside the domain.  With ``k`` interior thresholds there are
``k + 1`` bins.

Boundary convention (closed-upper):
    ``[lo, t1], (t1, t2], ..., (tk, hi]``

A value equal to a threshold falls in the lower-adjacent bin.  Values
outside the domain are clamped into the first / last bin and NaN falls in
the first bin, so no value is ever dropped.  Empty bins are kept so that
downstream stacking can address bins by index.
"""
from __future__ import annotations

import math
from typing import Any, Callable, NamedTuple, Sequence

import numpy as np
from jaxtyping import Float, Int

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


class Bin(NamedTuple):
    """One bucket of :func:`bin_points`."""

    lower: float
    upper: float
    members: tuple[Any, ...]

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.lower + self.upper)


def nice_step(lo: float, hi: float, count: int) -> float:
    """Tick step for roughly *count* intervals over ``[lo, hi]``."""
    raw = (hi - lo) / count
    power = math.floor(math.log10(raw))
    error = raw / 10.0**power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power < 0:
        # Divide by the inverse to keep steps like 0.05 exact-ish.
        return factor / 10.0 ** (-power)
    return factor * 10.0**power


def threshold_ticks(domain: tuple[float, float], count: int) -> Float[np.ndarray, "k"]:
    """Nice ticks covering *domain*, both ends included when they fall on a tick.

    Parameters
    ----------
    domain : tuple[float, float]
        ``(lo, hi)`` with ``lo < hi``.
    count : int
        Requested number of intervals (a hint, as in d3).

    Returns
    -------
    np.ndarray
        Ascending tick values.
    """
    lo, hi = float(domain[0]), float(domain[1])
    if count < 1:
        raise ValueError(f"Threshold count must be >= 1, got {count}")
    if not hi > lo:
        return np.array([lo])
    step = nice_step(lo, hi, count)
    first = math.ceil(lo / step)
    last = math.floor(hi / step)
    return np.arange(first, last + 1, dtype=np.float64) * step


def bin_edges(domain: tuple[float, float], count: int) -> Float[np.ndarray, "k"]:
    """Bin edges ``[lo, *interior thresholds, hi]``.

    A zero-width domain yields a single bin ``[lo, lo]``.

    Raises
    ------
    ValueError
        If *count* < 1.
    """
    lo, hi = float(domain[0]), float(domain[1])
    ticks = threshold_ticks((lo, hi), count)
    if not hi > lo:
        return np.array([lo, lo])
    interior = ticks[(ticks > lo) & (ticks < hi)]
    return np.concatenate([[lo], interior, [hi]])


def assign_bins(values, edges: Float[np.ndarray, "k"]) -> Int[np.ndarray, "n"]:
    """Bin index of every value under the closed-upper convention.

    Parameters
    ----------
    values : array_like
        Values to bin.
    edges : np.ndarray
        Output of :func:`bin_edges`.

    Returns
    -------
    np.ndarray
        Integer bin indices in ``[0, len(edges) - 2]``.
    """
    lo, hi = float(edges[0]), float(edges[-1])
    v = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=lo, posinf=hi, neginf=lo)
    v = np.clip(v, lo, hi)
    interior = edges[1:-1]
    return np.searchsorted(interior, v, side="left").astype(np.int64)


def bin_points(
    points: Sequence[Any],
    value_fn: Callable[[Any], float],
    domain: tuple[float, float],
    threshold_count: int,
) -> list[Bin]:
    """Group *points* into ordered bins along ``value_fn(point)``.

    Parameters
    ----------
    points : sequence
        Items to bin, in encounter order.
    value_fn : callable
        Extracts the binned value from an item.
    domain : tuple[float, float]
        Axis bounds.
    threshold_count : int
        Requested number of intervals.

    Returns
    -------
    list[Bin]
        Ascending bins; empty bins retained; members keep encounter order.
    """
    edges = bin_edges(domain, threshold_count)
    index = assign_bins([value_fn(p) for p in points], edges)
    members: list[list[Any]] = [[] for _ in range(len(edges) - 1)]
    for p, i in zip(points, index):
        members[i].append(p)
    return [
        Bin(lower=float(edges[i]), upper=float(edges[i + 1]), members=tuple(m))
        for i, m in enumerate(members)
    ]
