"""The closed enumeration of chart layouts."""
from __future__ import annotations

from enum import Enum


class LayoutKind(str, Enum):
    """Chart placement strategy; each member maps to exactly one algorithm."""

    GRID = "GRID"
    SCATTER = "SCATTER"
    BAR = "BAR"
    RADIAL = "RADIAL"
    HISTOGRAM = "HISTOGRAM"
    DOTPLOT = "DOTPLOT"
    BEESWARM = "BEESWARM"
    VIOLIN = "VIOLIN"

    @classmethod
    def parse(cls, value: "LayoutKind | str") -> "LayoutKind":
        """Resolve *value* to a member.

        Parameters
        ----------
        value : LayoutKind or str
            A member, or a member name in any case.

        Raises
        ------
        ValueError
            If *value* does not name a layout kind.  There is no fallback
            layout.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        available = ", ".join(k.value for k in cls)
        raise ValueError(
            f"Unknown layout kind {value!r}. Available layouts: {available}"
        )


OVERFLOW_KINDS: frozenset[LayoutKind] = frozenset({LayoutKind.RADIAL, LayoutKind.BAR})
"""Kinds whose positions may leave the inner canvas (decorative overflow)."""
