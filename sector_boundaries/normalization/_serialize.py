"""Serialisation of canonical rings back to the stored boundary format."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sector_boundaries.models.ring import CanonicalRing


def ring_to_polygon(ring: CanonicalRing) -> dict[str, object]:
    """Return the minimal GeoJSON ``Polygon`` mapping for *ring*.

    Points are written in GeoJSON ``[lng, lat]`` order.  The ring is not
    closed; ``normalize`` of the result yields *ring* again.
    """
    return {"type": "Polygon", "coordinates": [ring.to_geojson_ring()]}


def ring_to_json(ring: CanonicalRing) -> str:
    """Return ``ring_to_polygon(ring)`` as JSON text for the boundary column."""
    return json.dumps(ring_to_polygon(ring))
