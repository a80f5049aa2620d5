"""Data model for a single map coordinate.

Map widgets take latitude first, GeoJSON stores longitude first.  Inside
this package every point is a ``LatLng`` so the order is never ambiguous.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LatLng:
    """A WGS 84 point in map-library axis order.

    Attributes:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
    """

    lat: float
    lng: float

    def to_dict(self) -> dict[str, float]:
        """Serialise to ``{"lat": ..., "lng": ...}``."""
        return {"lat": self.lat, "lng": self.lng}

    def to_pair(self) -> list[float]:
        """Return ``[lat, lng]``, the position format Leaflet accepts."""
        return [self.lat, self.lng]

    def to_geojson(self) -> list[float]:
        """Return ``[lng, lat]`` (GeoJSON axis order)."""
        return [self.lng, self.lat]
