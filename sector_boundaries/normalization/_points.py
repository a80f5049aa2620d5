"""Point filtering and axis swapping.

Stored rings come from legacy imports and hand-typed JSON, so individual
points are often broken.  Broken points are dropped; the rest of the ring
is kept.
"""

from __future__ import annotations

import math

from sector_boundaries.models.point import LatLng


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, int | float) and not isinstance(value, bool)


def to_lat_lng(raw_point: object) -> LatLng | None:
    """Convert a GeoJSON ``[lng, lat]`` point to ``LatLng``.

    Returns ``None`` if the point is not a list/tuple of at least two finite
    numbers.  Components past the second (altitude) are ignored.
    """
    if not isinstance(raw_point, list | tuple) or len(raw_point) < 2:
        return None
    lng, lat = raw_point[0], raw_point[1]
    if not (_is_number(lng) and _is_number(lat)):
        return None
    try:
        lng_f, lat_f = float(lng), float(lat)
    except OverflowError:
        return None
    if not (math.isfinite(lng_f) and math.isfinite(lat_f)):
        return None
    return LatLng(lat=lat_f, lng=lng_f)


def filter_points(raw_ring: object) -> tuple[list[LatLng], int]:
    """Return the valid points of *raw_ring* and how many were dropped.

    A *raw_ring* that is not a list yields no points.
    """
    if not isinstance(raw_ring, list | tuple):
        return [], 0
    points: list[LatLng] = []
    dropped = 0
    for raw_point in raw_ring:
        point = to_lat_lng(raw_point)
        if point is None:
            dropped += 1
            continue
        points.append(point)
    return points, dropped
