"""PositionMap: frozen point-id -> (x, y) snapshot for one layout.

A PositionMap is an Equinox module holding one read-only NumPy array of
coordinates (never a JAX array) plus static metadata: the ordered ids and
the layout kind that produced it.  It is produced fresh by every layout
computation and every blend; nothing mutates it afterwards.

Row ``i`` of ``xy`` belongs to ``ids[i]``; row order is the insertion order
of the dataset the map was computed from.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

import equinox as eqx
import numpy as np
from jaxtyping import Float


class PositionMap(eqx.Module):
    """Immutable mapping from point id to canvas position.

    Parameters
    ----------
    ids : sequence of str
        Unique point ids, in row order.
    xy : array_like
        ``(len(ids), 2)`` coordinates; copied into a read-only float64 array.
    kind : str, optional
        Name of the layout kind that produced the map (``None`` for blends).
    """

    ids: tuple[str, ...] = eqx.field(static=True)
    xy: Float[np.ndarray, "n 2"]
    _rows: Mapping[str, int] = eqx.field(static=True, repr=False)
    kind: str | None = eqx.field(static=True, default=None)

    def __init__(
        self,
        ids: Sequence[str],
        xy,
        kind: str | None = None,
    ) -> None:
        self.ids = tuple(str(i) for i in ids)
        arr = np.array(xy, dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        arr.setflags(write=False)
        self.xy = arr
        self.kind = kind
        self._rows = MappingProxyType({point_id: row for row, point_id in enumerate(self.ids)})

    def __check_init__(self) -> None:
        """Validate shape and id uniqueness after frozen init."""
        if self.xy.shape != (len(self.ids), 2):
            raise ValueError(
                f"PositionMap xy shape {self.xy.shape} != ({len(self.ids)}, 2)"
            )
        if len(self._rows) != len(self.ids):
            raise ValueError("PositionMap ids must be unique")

    # constructors --------------------------------------------------------

    @classmethod
    def empty(cls, kind: str | None = None) -> "PositionMap":
        """A map with no points."""
        return cls(ids=(), xy=np.zeros((0, 2)), kind=kind)

    @classmethod
    def from_dict(
        cls,
        positions: Mapping[str, tuple[float, float]],
        kind: str | None = None,
    ) -> "PositionMap":
        """Build a map from ``{id: (x, y)}`` (dict order becomes row order)."""
        ids = list(positions)
        xy = np.array([positions[i] for i in ids], dtype=np.float64).reshape(-1, 2)
        return cls(ids=ids, xy=xy, kind=kind)

    # mapping protocol ----------------------------------------------------

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids)

    def __contains__(self, point_id: object) -> bool:
        return point_id in self._rows

    def __getitem__(self, point_id: str) -> tuple[float, float]:
        try:
            row = self._rows[point_id]
        except KeyError:
            raise KeyError(f"Point {point_id!r} has no position in this map") from None
        return float(self.xy[row, 0]), float(self.xy[row, 1])

    def get(self, point_id: str, default=None):
        """``self[point_id]`` or *default*."""
        try:
            return self[point_id]
        except KeyError:
            return default

    def items(self) -> Iterator[tuple[str, tuple[float, float]]]:
        for row, point_id in enumerate(self.ids):
            yield point_id, (float(self.xy[row, 0]), float(self.xy[row, 1]))

    def as_dict(self) -> dict[str, tuple[float, float]]:
        """Plain ``{id: (x, y)}`` copy."""
        return dict(self.items())

    def index_of(self) -> Mapping[str, int]:
        """Read-only ``{id: row}`` lookup table, built once per map."""
        return self._rows

    def equals(self, other: "PositionMap") -> bool:
        """Exact (bit-level) equality of ids and coordinates."""
        return self.ids == other.ids and np.array_equal(self.xy, other.xy)
