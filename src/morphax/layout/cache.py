"""Recompute-on-change cache for position maps.

A layout only changes when its kind, the dataset's geometric fields, the
geometry-affecting style fields or the layout params change.  The cache key
is a SHA-256 fingerprint over exactly those inputs, so progress updates
(which only re-blend) never trigger a layout computation, and a palette
change never invalidates a cached BEESWARM.
"""
from __future__ import annotations

import hashlib
import logging
from collections import OrderedDict
from typing import NamedTuple, Sequence

from ..data.points import Point
from ..style.style import StyleParameters
from .calculator import compute_layout
from .kinds import LayoutKind
from .params import EDITOR_PARAMS, LayoutParams
from .position_map import PositionMap

logger = logging.getLogger(__name__)


def dataset_fingerprint(points: Sequence[Point]) -> str:
    """SHA-256 over the ordered geometric fields of *points*."""
    digest = hashlib.sha256()
    for p in points:
        digest.update(
            f"{p.id}\x1f{p.category}\x1f{p.value_a!r}\x1f{p.value_b!r}\x1e".encode()
        )
    return digest.hexdigest()


def layout_fingerprint(
    kind: LayoutKind | str,
    points: Sequence[Point],
    style: StyleParameters,
    params: LayoutParams,
) -> str:
    """Composite cache key for one layout computation."""
    kind = LayoutKind.parse(kind)
    digest = hashlib.sha256()
    digest.update(kind.value.encode())
    digest.update(dataset_fingerprint(points).encode())
    digest.update(repr(style.geometry_key()).encode())
    digest.update(repr(params).encode())
    return digest.hexdigest()


class CacheStats(NamedTuple):
    entries: int
    hits: int
    misses: int
    evictions: int


class LayoutCache:
    """LRU cache of :class:`PositionMap` results.

    Parameters
    ----------
    max_entries : int
        Maximum number of cached maps (default 32).
    params : LayoutParams
        Layout params used for every computation through this cache.
    """

    def __init__(self, max_entries: int = 32, params: LayoutParams = EDITOR_PARAMS) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self.params = params
        self._max_entries = max_entries
        self._entries: OrderedDict[str, PositionMap] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(
        self,
        kind: LayoutKind | str,
        points: Sequence[Point],
        style: StyleParameters,
    ) -> PositionMap:
        """Return the cached map for these inputs, computing it on a miss."""
        key = layout_fingerprint(kind, points, style, self.params)
        cached = self._entries.get(key)
        if cached is not None:
            self._hits += 1
            self._entries.move_to_end(key)
            return cached

        self._misses += 1
        logger.debug("Layout cache miss for %s (%d points)", LayoutKind.parse(kind).value, len(points))
        result = compute_layout(kind, points, style, self.params)
        self._entries[key] = result
        if len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)
            self._evictions += 1
        return result

    def clear(self) -> None:
        """Drop every cached map (counters are kept)."""
        self._entries.clear()

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    def stats(self) -> CacheStats:
        return CacheStats(len(self._entries), self._hits, self._misses, self._evictions)

    def __len__(self) -> int:
        return len(self._entries)
