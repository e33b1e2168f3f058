"""Scroll offset -> (step index, local progress).

The scroll track holds one segment per pair of adjacent steps, so a story
of ``n`` steps has ``n - 1`` segments spread over ``extent`` pixels.
"""
from __future__ import annotations

import math
from typing import NamedTuple


class ScrollPosition(NamedTuple):
    """Active segment and the progress within it."""

    step_index: int  # index of the earlier step of the active pair
    local_progress: float  # 0 at steps[step_index], 1 at steps[step_index + 1]


def map_scroll_offset(raw_offset: float, extent: float, step_count: int) -> ScrollPosition:
    """Convert a raw scroll offset into the active step pair and progress.

    Parameters
    ----------
    raw_offset : float
        Scroll offset in pixels (any value; clamped).
    extent : float
        Scrollable distance for the full traversal of ``step_count - 1``
        segments.
    step_count : int
        Number of steps.

    Returns
    -------
    ScrollPosition
        ``step_index`` in ``[0, step_count - 2]``; ``local_progress`` in
        ``[0, 1]``, exactly 1 at the very end of the track.  Fewer than two
        steps, or a non-positive extent, give ``(0, 0.0)``.
    """
    if step_count <= 1 or not extent > 0:
        return ScrollPosition(0, 0.0)

    global_progress = min(max(float(raw_offset) / float(extent), 0.0), 1.0)
    if math.isnan(global_progress):
        global_progress = 0.0
    scaled = global_progress * (step_count - 1)
    index = math.floor(scaled)

    if index >= step_count - 1:
        return ScrollPosition(step_count - 2, 1.0)
    return ScrollPosition(index, scaled - index)


def scroll_extent(viewport_height: float, step_count: int) -> float:
    """Track length when every segment is one viewport tall."""
    return viewport_height * max(step_count - 1, 0)


def overall_percent(position: ScrollPosition, step_count: int) -> int:
    """Rounded percentage of the whole story traversed (scroll indicator)."""
    if step_count <= 1:
        return 0
    return round((position.step_index + position.local_progress) / (step_count - 1) * 100)
