"""Boundary normalisation - heterogeneous input to a canonical ring.

Sector, subsector and cuadrante boundaries are stored in several shapes:
GeoJSON ``Polygon``, GeoJSON ``Feature`` wrapping a ``Polygon``, and two
legacy raw-array layouts.  This package turns any of them into a
``CanonicalRing`` of ``LatLng`` points (latitude first), or reports that
there is no usable boundary.

The pipeline is split into focused stages:
- **_decode**: JSON text → decoded value (never raises)
- **_shapes**: ordered shape predicates → raw outer ring
- **_points**: point filtering and ``[lng, lat]`` → ``LatLng`` swap
- **_serialize**: canonical ring → GeoJSON ``Polygon`` for storage

No exception escapes ``parse_boundary`` or ``normalize`` for bad data.
Malformed JSON, unknown shapes and rings with no valid points are all the
same "no boundary" outcome, distinguished only by ``EmptyReason`` for
logging.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from sector_boundaries.models.ring import CanonicalRing
from sector_boundaries.normalization._decode import decode_input, is_empty_input, is_missing
from sector_boundaries.normalization._points import filter_points, to_lat_lng
from sector_boundaries.normalization._serialize import ring_to_json, ring_to_polygon
from sector_boundaries.normalization._shapes import BoundaryShape, select_ring

logger = logging.getLogger("sector_boundaries.normalization")

__all__ = [
    "BoundaryShape",
    "Empty",
    "EmptyReason",
    "Parsed",
    "filter_points",
    "normalize",
    "parse_boundary",
    "ring_to_json",
    "ring_to_polygon",
    "to_lat_lng",
]


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


class EmptyReason(enum.Enum):
    """Why a boundary input produced no ring."""

    NO_INPUT = "no_input"
    INVALID_JSON = "invalid_json"
    UNRECOGNISED_SHAPE = "unrecognised_shape"
    NO_VALID_POINTS = "no_valid_points"


@dataclass(frozen=True, slots=True)
class Parsed:
    """A boundary that normalised to a ring.

    Attributes:
        ring: The canonical ring.
        shape: The input shape it was read from.
        dropped_points: Number of invalid points filtered out.
    """

    ring: CanonicalRing
    shape: BoundaryShape
    dropped_points: int = 0


@dataclass(frozen=True, slots=True)
class Empty:
    """A boundary input with nothing to show."""

    reason: EmptyReason


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_boundary(raw: object) -> Parsed | Empty:
    """Normalise *raw* boundary input, reporting why when there is no ring.

    Args:
        raw: JSON text or an already decoded value in any recognised shape.

    Returns:
        ``Parsed`` with the canonical ring, or ``Empty`` with the reason.
    """
    if is_empty_input(raw):
        return Empty(EmptyReason.NO_INPUT)

    value = decode_input(raw)
    if is_missing(value):
        return Empty(EmptyReason.INVALID_JSON)

    selected = select_ring(value)
    if selected is None:
        logger.debug("Unrecognised boundary shape: %s", type(value).__name__)
        return Empty(EmptyReason.UNRECOGNISED_SHAPE)

    shape, raw_ring = selected
    points, dropped = filter_points(raw_ring)
    if dropped:
        logger.debug("Dropped %d invalid point(s) from %s boundary", dropped, shape.value)
    if not points:
        logger.warning("Boundary %s has no valid points, treating as absent", shape.value)
        return Empty(EmptyReason.NO_VALID_POINTS)

    return Parsed(ring=CanonicalRing(tuple(points)), shape=shape, dropped_points=dropped)


def normalize(raw: object) -> CanonicalRing | None:
    """Return the canonical ring for *raw*, or ``None`` if there is none."""
    result = parse_boundary(raw)
    if isinstance(result, Parsed):
        return result.ring
    return None
