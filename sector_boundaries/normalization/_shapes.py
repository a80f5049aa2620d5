"""Shape dispatch for decoded boundary values.

Four shapes are recognised, tried in a fixed order; the first whose
predicate matches selects the ring.  The predicates are disjoint: the two
GeoJSON shapes only match mappings and the two raw-array shapes only
match lists, split on whether the first element is itself a ring.

==================  =============================================  =====================
Shape               Matches                                        Ring taken
==================  =============================================  =====================
``POLYGON``         ``{"type": "Polygon", "coordinates": [...]}``  ``coordinates[0]``
``FEATURE``         ``{"type": "Feature", "geometry": Polygon}``   ``geometry.coordinates[0]``
``NESTED_RINGS``    ``[[[lng, lat], ...], ...]``                   ``value[0]``
``FLAT_RING``       ``[[lng, lat], ...]``                          ``value``
==================  =============================================  =====================
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass


class BoundaryShape(enum.Enum):
    """Recognised boundary input shapes."""

    POLYGON = "polygon"
    FEATURE = "feature"
    NESTED_RINGS = "nested_rings"
    FLAT_RING = "flat_ring"


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _is_polygon(value: object) -> bool:
    return (
        isinstance(value, dict)
        and value.get("type") == "Polygon"
        and isinstance(value.get("coordinates"), list)
    )


def _is_feature(value: object) -> bool:
    if not isinstance(value, dict) or value.get("type") != "Feature":
        return False
    return _is_polygon(value.get("geometry"))


def _is_nested_rings(value: object) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and isinstance(value[0], list)
        and len(value[0]) > 0
        and isinstance(value[0][0], list)
    )


def _is_flat_ring(value: object) -> bool:
    return isinstance(value, list) and len(value) > 0 and isinstance(value[0], list)


# ---------------------------------------------------------------------------
# Ring extractors
# ---------------------------------------------------------------------------


def _first_ring(coordinates: list[object]) -> object:
    return coordinates[0] if coordinates else None


def _polygon_ring(value: object) -> object:
    return _first_ring(value["coordinates"])  # type: ignore[index]


def _feature_ring(value: object) -> object:
    return _first_ring(value["geometry"]["coordinates"])  # type: ignore[index]


def _nested_ring(value: object) -> object:
    return value[0]  # type: ignore[index]


def _flat_ring(value: object) -> object:
    return value


@dataclass(frozen=True, slots=True)
class _ShapeMatcher:
    shape: BoundaryShape
    matches: Callable[[object], bool]
    ring: Callable[[object], object]


# Order matters: NESTED_RINGS must be tried before FLAT_RING.
SHAPE_MATCHERS: tuple[_ShapeMatcher, ...] = (
    _ShapeMatcher(BoundaryShape.POLYGON, _is_polygon, _polygon_ring),
    _ShapeMatcher(BoundaryShape.FEATURE, _is_feature, _feature_ring),
    _ShapeMatcher(BoundaryShape.NESTED_RINGS, _is_nested_rings, _nested_ring),
    _ShapeMatcher(BoundaryShape.FLAT_RING, _is_flat_ring, _flat_ring),
)


def select_ring(value: object) -> tuple[BoundaryShape, object] | None:
    """Return ``(shape, raw_ring)`` for *value*, or ``None`` if unrecognised.

    ``raw_ring`` is whatever sits at the ring position; it has not been
    checked to be a list of points yet.
    """
    for matcher in SHAPE_MATCHERS:
        if matcher.matches(value):
            return matcher.shape, matcher.ring(value)
    return None
