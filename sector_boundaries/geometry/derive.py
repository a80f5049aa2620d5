"""Geometry derivation for canonical rings.

Computes the centroid of a ring, the display centre (ring centroid, then
manual coordinates, then the configured default anchor) and the bounding
region a map view is framed to.

The centroid is the unweighted mean of the ring's vertices, not the
area-weighted polygon centroid.  For unevenly sampled rings it is biased
towards densely sampled edges; the map modals have always used it, and
the form pre-fill relies on matching what the modals show.

Failure model:
- Absent geometry is never an error: it falls through the fallback chain
  or yields ``None``.
- ``centroid`` of an empty sequence is a programming error and raises
  ``EmptyRingError``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from sector_boundaries.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from sector_boundaries.core.exceptions import EmptyRingError
from sector_boundaries.models.map_view import CenterSource
from sector_boundaries.models.point import LatLng
from sector_boundaries.models.region import BoundingRegion, FitRegion
from sector_boundaries.models.ring import CanonicalRing

logger = logging.getLogger("sector_boundaries.geometry")


# ---------------------------------------------------------------------------
# Centroid
# ---------------------------------------------------------------------------


def centroid(ring: CanonicalRing | Sequence[LatLng]) -> LatLng:
    """Return the arithmetic mean of the ring's vertices.

    Args:
        ring: A canonical ring (or any sequence of ``LatLng``).

    Returns:
        Mean latitude and mean longitude as a ``LatLng``.

    Raises:
        EmptyRingError: If *ring* has no points.  Callers must check ring
            presence first.
    """
    n = len(ring)
    if n == 0:
        msg = "Cannot compute centroid of an empty ring"
        raise EmptyRingError(msg)
    # divide first so the sum of values near the float limit stays finite
    return LatLng(
        lat=math.fsum(p.lat / n for p in ring),
        lng=math.fsum(p.lng / n for p in ring),
    )


# ---------------------------------------------------------------------------
# Manual coordinates
# ---------------------------------------------------------------------------


def coerce_coordinate(value: object) -> float | None:
    """Coerce a manually entered coordinate to ``float``.

    Accepts ints, floats, ``Decimal`` and numeric strings (the backend
    returns decimal columns as strings).  Returns ``None`` for ``None``,
    booleans, blank or non-numeric strings and non-finite values.  Zero is
    a valid coordinate.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float | Decimal):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(Decimal(text))
        except (InvalidOperation, OverflowError, ValueError):
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def has_valid_location(lat: object, lng: object) -> bool:
    """Whether *lat*/*lng* describe a plausible, explicitly entered location.

    Both must coerce, lie within WGS 84 bounds and be non-zero: a ``0``
    in either field is how unset coordinates were historically stored, so
    a marker at (0, 0) is never shown.
    """
    lat_value = coerce_coordinate(lat)
    lng_value = coerce_coordinate(lng)
    if lat_value is None or lng_value is None:
        return False
    if lat_value == 0 or lng_value == 0:
        return False
    return (
        MIN_LATITUDE <= lat_value <= MAX_LATITUDE
        and MIN_LONGITUDE <= lng_value <= MAX_LONGITUDE
    )


# ---------------------------------------------------------------------------
# Display centre
# ---------------------------------------------------------------------------


def resolve_center(
    ring: CanonicalRing | None,
    manual_lat: object,
    manual_lng: object,
    default_point: LatLng,
) -> tuple[LatLng, CenterSource]:
    """Pick the display centre and report which fallback step produced it.

    Order, first satisfied wins:

    1. *ring* present and non-empty → ``centroid(ring)``.
    2. Both manual coordinates present and numeric → that point.
    3. *default_point*.

    A single manual coordinate without its partner counts as absent.
    """
    if ring is not None and len(ring) > 0:
        return centroid(ring), CenterSource.RING

    lat = coerce_coordinate(manual_lat)
    lng = coerce_coordinate(manual_lng)
    if lat is not None and lng is not None:
        return LatLng(lat=lat, lng=lng), CenterSource.MANUAL

    return default_point, CenterSource.DEFAULT


def display_center(
    ring: CanonicalRing | None,
    manual_lat: object,
    manual_lng: object,
    default_point: LatLng,
) -> LatLng:
    """Return the point to centre the map on.  See ``resolve_center``."""
    center, _source = resolve_center(ring, manual_lat, manual_lng, default_point)
    return center


# ---------------------------------------------------------------------------
# Bounding region
# ---------------------------------------------------------------------------


def bounding_region(ring: CanonicalRing | None, padding_px: float) -> FitRegion | None:
    """Return the minimal lat/lng rectangle covering *ring*, with padding.

    Args:
        ring: The canonical ring, or ``None``.
        padding_px: Screen-space padding for the renderer.  Passed through
            unchanged; the rectangle itself is not enlarged.

    Returns:
        A ``FitRegion``, or ``None`` if *ring* is absent or empty.
    """
    if ring is None or len(ring) == 0:
        return None

    from shapely.geometry import MultiPoint

    min_lng, min_lat, max_lng, max_lat = MultiPoint([(p.lng, p.lat) for p in ring]).bounds
    bounds = BoundingRegion(south=min_lat, west=min_lng, north=max_lat, east=max_lng)
    logger.debug(
        "Bounding region | points=%d | bounds=[%.6f, %.6f, %.6f, %.6f] | padding=%.0f px",
        len(ring),
        bounds.south,
        bounds.west,
        bounds.north,
        bounds.east,
        padding_px,
    )
    return FitRegion(bounds=bounds, padding_px=padding_px)
