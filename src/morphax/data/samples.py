"""Reproducible demo dataset (three categories, integer values 0-99)."""
from __future__ import annotations

import numpy as np

from .points import Point


def make_demo_points(n: int = 50, seed: int = 0) -> list[Point]:
    """Generate the demo dataset.

    Ids are ``item-{i}``; the first 15 points are category ``A``, the next
    15 ``B`` and the rest ``C``.

    Parameters
    ----------
    n : int
        Number of points.
    seed : int
        Seed for ``numpy.random.default_rng``.

    Returns
    -------
    list[Point]
    """
    rng = np.random.default_rng(seed)
    values = rng.integers(0, 100, size=(n, 2))
    return [
        Point(
            id=f"item-{i}",
            category="A" if i < 15 else "B" if i < 30 else "C",
            value_a=float(values[i, 0]),
            value_b=float(values[i, 1]),
            label=f"Item {i + 1}",
        )
        for i in range(n)
    ]
