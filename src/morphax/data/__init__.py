"""Dataset records and the demo dataset."""

from .points import (
    DEFAULT_CATEGORY,
    CoercionReport,
    Point,
    categories,
    coerce_points,
    ensure_unique_ids,
)
from .samples import make_demo_points

__all__ = [
    "DEFAULT_CATEGORY",
    "CoercionReport",
    "Point",
    "categories",
    "coerce_points",
    "ensure_unique_ids",
    "make_demo_points",
]
