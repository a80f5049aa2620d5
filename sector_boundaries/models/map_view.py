"""Data model for a prepared map view.

A ``MapView`` is everything the two map modals and the coordinate form
need for one boundary record: the normalised ring, the centre and where
it came from, the region to frame, the fit instruction and the polygon
style.  It is the output of ``prepare_map_view``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sector_boundaries.core.constants import (
    DEFAULT_FILL_OPACITY,
    DEFAULT_MAP_COLOR,
    DEFAULT_STROKE_OPACITY,
    DEFAULT_STROKE_WEIGHT,
)

if TYPE_CHECKING:
    from sector_boundaries.models.metadata import MapViewPayload
    from sector_boundaries.models.point import LatLng
    from sector_boundaries.models.region import FitRegion
    from sector_boundaries.models.ring import CanonicalRing


class CenterSource(enum.Enum):
    """Which step of the fallback chain produced the display centre."""

    RING = "ring"
    MANUAL = "manual"
    DEFAULT = "default"


class FitMode(enum.Enum):
    """How the map collaborator frames the view."""

    FIT_BOUNDS = "fit_bounds"
    CENTER = "center"


@dataclass(frozen=True, slots=True)
class FitInstruction:
    """A viewport request for the map-rendering collaborator.

    ``region`` is set for ``FIT_BOUNDS``; ``zoom`` is set for ``CENTER``.
    ``center`` is always set so a collaborator can fall back on it.
    """

    mode: FitMode
    center: LatLng
    region: FitRegion | None = None
    zoom: int | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "mode": self.mode.value,
            "center": self.center.to_dict(),
            "region": self.region.to_dict() if self.region else None,
            "zoom": self.zoom,
        }


@dataclass(frozen=True, slots=True)
class PolygonStyle:
    """Presentational parameters for the ring layer.

    Attributes:
        color: Stroke colour (``#RRGGBB``).
        fill_color: Fill colour (``#RRGGBB``).
        opacity: Stroke opacity, 0-1.
        fill_opacity: Fill opacity, 0-1.
        weight: Stroke weight in pixels.
    """

    color: str = DEFAULT_MAP_COLOR
    fill_color: str = DEFAULT_MAP_COLOR
    opacity: float = DEFAULT_STROKE_OPACITY
    fill_opacity: float = DEFAULT_FILL_OPACITY
    weight: float = DEFAULT_STROKE_WEIGHT

    def to_dict(self) -> dict[str, object]:
        return {
            "color": self.color,
            "fill_color": self.fill_color,
            "opacity": self.opacity,
            "fill_opacity": self.fill_opacity,
            "weight": self.weight,
        }


@dataclass(frozen=True, slots=True)
class MapView:
    """A prepared map view for one boundary record.

    Attributes:
        name: Name of the source record.
        ring: Normalised boundary, or ``None`` when there is none.
        center: Display centre (also the anchor marker position).
        center_source: Fallback step that produced ``center``.
        region: Fit region, or ``None`` when there is no ring.
        fit: Viewport instruction for the map collaborator.
        style: Polygon layer style.
        form_prefill: Coordinates to pre-fill the lat/lng form fields with,
            or ``None`` when the form already has coordinates or nothing
            better than the default anchor is known.
    """

    name: str
    ring: CanonicalRing | None
    center: LatLng
    center_source: CenterSource
    region: FitRegion | None
    fit: FitInstruction
    style: PolygonStyle
    form_prefill: LatLng | None = None

    @property
    def has_boundary(self) -> bool:
        """Whether a boundary ring is available."""
        return self.ring is not None

    @property
    def has_location(self) -> bool:
        """Whether the view shows real data rather than the default anchor."""
        return self.center_source is not CenterSource.DEFAULT

    @property
    def point_count(self) -> int:
        """Number of points in the ring (0 when there is none)."""
        return len(self.ring) if self.ring is not None else 0

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict for the UI collaborators."""
        return {
            "name": self.name,
            "positions": self.ring.to_positions() if self.ring is not None else None,
            "center": self.center.to_dict(),
            "center_source": self.center_source.value,
            "region": self.region.to_dict() if self.region else None,
            "fit": self.fit.to_dict(),
            "style": self.style.to_dict(),
            "form_prefill": self.form_prefill.to_dict() if self.form_prefill else None,
        }

    def to_payload(self) -> MapViewPayload:
        """Build the pydantic transport payload for this view."""
        from sector_boundaries.models.metadata import MapViewPayload

        return MapViewPayload.from_map_view(self)
