"""Category colour assignment.

Categories are sorted before assignment, so a category keeps its colour no
matter the order in which it appears in the data.  When there are more
categories than colours the palette wraps around (ordinal scale).
"""
from __future__ import annotations

from typing import Iterable, Sequence

from ..data.points import Point, categories
from .style import ColorMode, StyleParameters


def assign_colors(category_labels: Iterable[str], palette: Sequence[str]) -> dict[str, str]:
    """Map each distinct category to a palette colour.

    Parameters
    ----------
    category_labels : iterable of str
        Categories, any order, duplicates allowed.
    palette : sequence of str
        Ordered colours; cycled when shorter than the category list.

    Returns
    -------
    dict[str, str]
        ``{category: colour}`` in sorted category order.

    Raises
    ------
    ValueError
        If *palette* is empty.
    """
    palette = tuple(palette)
    if not palette:
        raise ValueError("Cannot assign colours from an empty palette")
    ordered = sorted(set(category_labels))
    return {cat: palette[i % len(palette)] for i, cat in enumerate(ordered)}


def point_colors(points: Sequence[Point], style: StyleParameters) -> dict[str, str]:
    """Fill colour per point id, honoring ``style.color_mode``."""
    if style.color_mode is ColorMode.SINGLE:
        return {p.id: style.base_color for p in points}
    mapping = assign_colors((p.category for p in points), style.palette)
    return {p.id: mapping[p.category] for p in points}


def legend_entries(points: Sequence[Point], style: StyleParameters) -> list[tuple[str, str]]:
    """Ordered ``(category, colour)`` pairs; empty in single-colour mode."""
    if style.color_mode is ColorMode.SINGLE:
        return []
    mapping = assign_colors(categories(points), style.palette)
    return list(mapping.items())
