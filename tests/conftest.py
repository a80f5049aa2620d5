"""Shared pytest fixtures for the sector boundaries test suite."""

import json

import pytest

from sector_boundaries.core.config import GeometryConfig
from sector_boundaries.models.point import LatLng
from sector_boundaries.models.ring import CanonicalRing

# ---------------------------------------------------------------------------
# Reference boundaries
# ---------------------------------------------------------------------------

# Cuadrante in Lima, stored in GeoJSON [lng, lat] order
LIMA_RING_LNG_LAT = [
    [-77.03, -12.05],
    [-77.02, -12.05],
    [-77.02, -12.04],
    [-77.03, -12.04],
]


@pytest.fixture()
def lima_polygon() -> dict[str, object]:
    """GeoJSON Polygon for a small cuadrante in Lima."""
    return {"type": "Polygon", "coordinates": [[list(p) for p in LIMA_RING_LNG_LAT]]}


@pytest.fixture()
def lima_polygon_json(lima_polygon: dict[str, object]) -> str:
    """The Lima polygon as stored in the boundary column."""
    return json.dumps(lima_polygon)


@pytest.fixture()
def lima_feature(lima_polygon: dict[str, object]) -> dict[str, object]:
    """The Lima polygon wrapped in a GeoJSON Feature."""
    return {"type": "Feature", "properties": {"nombre": "C-01"}, "geometry": lima_polygon}


@pytest.fixture()
def square_ring() -> CanonicalRing:
    """Square ring with corners at (0, 0) and (2, 2)."""
    return CanonicalRing(
        (
            LatLng(lat=0.0, lng=0.0),
            LatLng(lat=0.0, lng=2.0),
            LatLng(lat=2.0, lng=2.0),
            LatLng(lat=2.0, lng=0.0),
        )
    )


@pytest.fixture()
def default_config() -> GeometryConfig:
    """Configuration with the built-in defaults."""
    return GeometryConfig()


@pytest.fixture()
def default_point(default_config: GeometryConfig) -> LatLng:
    """The configured fallback anchor."""
    return default_config.default_point
