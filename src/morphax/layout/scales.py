"""Linear and band scales (d3 ``scaleLinear`` / ``scaleBand`` semantics)."""
from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np
from jaxtyping import Float


def linear_scale(
    values,
    domain: tuple[float, float],
    range_: tuple[float, float],
    clamp: bool = True,
) -> Float[np.ndarray, "..."]:
    """Map *values* linearly from *domain* onto *range_*.

    Parameters
    ----------
    values : array_like
        Input values.  Non-finite entries map to the start of the range.
    domain : tuple[float, float]
        ``(d0, d1)``.  A zero-width domain maps everything to the range
        midpoint instead of producing NaN.
    range_ : tuple[float, float]
        ``(r0, r1)``; may be inverted (``r0 > r1``).
    clamp : bool
        Clamp inputs to the domain first (default True).

    Returns
    -------
    np.ndarray
        float64 array with the shape of *values*.
    """
    d0, d1 = float(domain[0]), float(domain[1])
    r0, r1 = float(range_[0]), float(range_[1])
    v = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=d0, posinf=d1, neginf=d0)

    if d1 == d0:
        return np.full_like(v, 0.5 * (r0 + r1))
    if clamp:
        v = np.clip(v, min(d0, d1), max(d0, d1))
    return r0 + (v - d0) / (d1 - d0) * (r1 - r0)


class BandScale(NamedTuple):
    """Band positions for an ordered set of categories."""

    domain: tuple[str, ...]
    starts: tuple[float, ...]
    bandwidth: float

    def center(self, category: str) -> float:
        """Centre of the band for *category*."""
        return self.starts[self.domain.index(category)] + self.bandwidth / 2


def band_scale(
    categories: Sequence[str],
    extent: tuple[float, float],
    padding: float,
) -> BandScale:
    """Evenly spaced bands with equal inner/outer padding, centre aligned.

    Parameters
    ----------
    categories : sequence of str
        Band domain, in display order.
    extent : tuple[float, float]
        ``(start, stop)`` pixel range.
    padding : float
        Fraction of each step left empty between (and around) bands.

    Returns
    -------
    BandScale
    """
    n = len(categories)
    start, stop = float(extent[0]), float(extent[1])
    step = (stop - start) / max(1.0, n - padding + 2 * padding)
    start += (stop - start - step * (n - padding)) * 0.5
    return BandScale(
        domain=tuple(categories),
        starts=tuple(start + step * i for i in range(n)),
        bandwidth=step * (1.0 - padding),
    )
