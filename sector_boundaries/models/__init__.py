"""Data models.

- LatLng: A point in map axis order (latitude first)
- CanonicalRing: A normalised, non-empty boundary ring
- BoundingRegion / FitRegion: Rectangle to frame, with pixel padding
- BoundaryRecord: Boundary fields of a sector / subsector / cuadrante
- MapView: Prepared view for the map and form collaborators
- MapViewPayload: Pydantic transport document for a MapView
"""

from sector_boundaries.models.map_view import (
    CenterSource,
    FitInstruction,
    FitMode,
    MapView,
    PolygonStyle,
)
from sector_boundaries.models.point import LatLng
from sector_boundaries.models.record import BoundaryRecord
from sector_boundaries.models.region import BoundingRegion, FitRegion
from sector_boundaries.models.ring import CanonicalRing

__all__ = [
    "BoundaryRecord",
    "BoundingRegion",
    "CanonicalRing",
    "CenterSource",
    "FitInstruction",
    "FitMode",
    "FitRegion",
    "LatLng",
    "MapView",
    "PolygonStyle",
]
