"""Point records: the flat, uniquely identified dataset every layout places.

A point carries four geometry-critical fields (``id``, ``category``,
``value_a``, ``value_b``) plus a display label and a side-table of
auxiliary scalars (``extra``) used only for tooltips.

Coercion policy
---------------
A missing, boolean, non-numeric or non-finite ``value_a`` / ``value_b`` is
laid out as ``0.0``.  The point remembers which fields were coerced
(``coerced_fields``) and :func:`coerce_points` reports the total so the
caller can surface a warning count instead of silently corrupting data.
"""
from __future__ import annotations

import math
import numbers
import warnings
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, NamedTuple, Sequence

_VALUE_A_KEYS = ("value_a", "valueA")
_VALUE_B_KEYS = ("value_b", "valueB")
_CORE_KEYS = frozenset({"id", "category", "label", *_VALUE_A_KEYS, *_VALUE_B_KEYS})

DEFAULT_CATEGORY = "Uncategorized"


def _to_float(value: Any) -> float | None:
    """Return *value* as a finite float, or None when it cannot be one."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, numbers.Real):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return result if math.isfinite(result) else None


@dataclass(frozen=True)
class Point:
    """A single data point.

    Parameters
    ----------
    id : str
        Unique, stable identifier; the join key between layouts.
    category : str
        Grouping label (bands, colours).
    value_a, value_b : float
        Numeric values on the ``[0, 100]`` reference domain.  Invalid
        values are coerced to 0.0 (see module docstring).
    label : str
        Display label.
    extra : Mapping[str, Any]
        Auxiliary scalar fields, read-only.
    """

    id: str
    category: str = DEFAULT_CATEGORY
    value_a: float = 0.0
    value_b: float = 0.0
    label: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict)
    coerced_fields: tuple[str, ...] = field(default=(), init=False, compare=False)

    def __post_init__(self) -> None:
        # Frozen dataclass; normalise through object.__setattr__.
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "category", str(self.category))
        object.__setattr__(self, "label", str(self.label) if self.label else self.id)
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

        coerced = []
        for name in ("value_a", "value_b"):
            value = _to_float(getattr(self, name))
            if value is None:
                coerced.append(name)
                value = 0.0
            object.__setattr__(self, name, value)
        object.__setattr__(self, "coerced_fields", tuple(coerced))

    @property
    def is_coerced(self) -> bool:
        """True if any numeric field was replaced by 0.0."""
        return bool(self.coerced_fields)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Point":
        """Build a point from a loosely typed record.

        Accepts both ``valueA`` / ``value_a`` spellings.  Unknown keys are
        kept in ``extra``.

        Raises
        ------
        ValueError
            If the record has no ``id``.
        """
        if record.get("id") is None:
            raise ValueError(f"Point record has no 'id': {dict(record)!r}")

        def _first(keys):
            for key in keys:
                if key in record:
                    return record[key]
            return None

        category = record.get("category")
        return cls(
            id=record["id"],
            category=DEFAULT_CATEGORY if category in (None, "") else category,
            value_a=_first(_VALUE_A_KEYS),
            value_b=_first(_VALUE_B_KEYS),
            label=record.get("label") or "",
            extra={k: v for k, v in record.items() if k not in _CORE_KEYS},
        )


class CoercionReport(NamedTuple):
    """Result of :func:`coerce_points`."""

    points: tuple[Point, ...]
    n_coerced: int  # points with at least one value laid out as 0.0


def coerce_points(records: Iterable[Point | Mapping[str, Any]]) -> CoercionReport:
    """Normalise records into :class:`Point` objects.

    Parameters
    ----------
    records : iterable of Point or mapping
        Dataset rows in insertion order.

    Returns
    -------
    CoercionReport
        The points (order preserved) and the number of coerced points.

    Raises
    ------
    ValueError
        If two records share an id.
    """
    points = tuple(
        r if isinstance(r, Point) else Point.from_record(r) for r in records
    )
    ensure_unique_ids(points)

    n_coerced = sum(1 for p in points if p.is_coerced)
    if n_coerced:
        warnings.warn(
            f"{n_coerced} of {len(points)} points have missing or non-numeric "
            "values; they are laid out at 0.",
            stacklevel=2,
        )
    return CoercionReport(points=points, n_coerced=n_coerced)


def ensure_unique_ids(points: Sequence[Point]) -> None:
    """Raise ``ValueError`` if any id occurs more than once."""
    seen: set[str] = set()
    for p in points:
        if p.id in seen:
            raise ValueError(f"Duplicate point id {p.id!r}; ids must be unique.")
        seen.add(p.id)


def categories(points: Iterable[Point]) -> list[str]:
    """Sorted distinct category labels."""
    return sorted({p.category for p in points})
