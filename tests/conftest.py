"""Shared test fixtures for the morphax test suite.

Float64 enforcement is verified at import time: the collision kernel's
bit-identical determinism depends on it.
"""

import jax.numpy as jnp
import pytest

import morphax  # noqa: F401  (enables float64)
from morphax.data import Point, make_demo_points
from morphax.layout import Canvas, LayoutParams
from morphax.style import StyleParameters

# ---------------------------------------------------------------------------
# Float64 enforcement check fails LOUD if x64 is not enabled
# ---------------------------------------------------------------------------
_probe = jnp.array(1.0)
assert _probe.dtype == jnp.float64, (
    f"JAX float64 not enabled!  Got dtype={_probe.dtype}.  "
    "morphax/__init__.py must enable jax_enable_x64 before any JAX import."
)


# ---------------------------------------------------------------------------
# Params / style fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def square_params() -> LayoutParams:
    """A 100x100 inner canvas: pixel values equal domain values."""
    return LayoutParams(canvas=Canvas.from_inner(100.0, 100.0))


@pytest.fixture
def editor_params() -> LayoutParams:
    """The 720x520 inner editor canvas."""
    return LayoutParams(canvas=Canvas(width=800, height=600, margin=40))


@pytest.fixture
def style() -> StyleParameters:
    return StyleParameters(point_radius=8.0)


# ---------------------------------------------------------------------------
# Dataset fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def three_points() -> list[Point]:
    """valueA = 0, 50, 100 in two categories."""
    return [
        Point("p0", "A", 0.0, 0.0),
        Point("p1", "B", 50.0, 50.0),
        Point("p2", "A", 100.0, 100.0),
    ]


@pytest.fixture
def demo_points() -> list[Point]:
    """The 50-point, three-category demo dataset."""
    return make_demo_points(50, seed=7)
