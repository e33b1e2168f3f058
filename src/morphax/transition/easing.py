"""Easing functions for morph progress.

All easings map ``[0, 1]`` onto ``[0, 1]``, are monotonic non-decreasing,
clamp their input, and hit the endpoints exactly: ``f(0) = 0``,
``f(1) = 1``.

Cubic in-out (the default morph easing):
    f(t) = 4 t^3              for t < 0.5
    f(t) = 1 - 4 (1 - t)^3    for t >= 0.5
    f(0.5) = 0.5, symmetric: f(1 - t) = 1 - f(t)

Smoothstep (C1 cubic Hermite):
    f(t) = 3 t^2 - 2 t^3
"""
from __future__ import annotations

from typing import Callable

import numpy as np


def _scalar_or_array(t, result):
    return float(result) if np.ndim(t) == 0 else result


def ease_cubic_in_out(t):
    """Cubic ease-in-out; scalar in -> float out, array in -> array out."""
    t_c = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    result = np.where(t_c < 0.5, 4.0 * t_c**3, 1.0 - 4.0 * (1.0 - t_c) ** 3)
    return _scalar_or_array(t, result)


def ease_linear(t):
    """Identity on ``[0, 1]``."""
    t_c = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    return _scalar_or_array(t, t_c)


def ease_smoothstep(t):
    """C1 smoothstep ``3t^2 - 2t^3``."""
    t_c = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    return _scalar_or_array(t, t_c * t_c * (3.0 - 2.0 * t_c))


EASINGS: dict[str, Callable] = {
    "cubic-in-out": ease_cubic_in_out,
    "linear": ease_linear,
    "smoothstep": ease_smoothstep,
}


def get_easing(name: str) -> Callable:
    """Look up an easing by name.

    Raises
    ------
    ValueError
        If *name* is not registered.
    """
    try:
        return EASINGS[name]
    except KeyError:
        available = ", ".join(sorted(EASINGS))
        raise ValueError(f"Unknown easing {name!r}. Available easings: {available}") from None
