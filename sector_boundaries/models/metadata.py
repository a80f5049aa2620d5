"""Pydantic transport payload for a prepared map view.

The map modals and the coordinate form receive the view as JSON.  This
module defines that document so its shape is validated and versioned in
one place.

The payload is split into sections:
- **geometry**: ring positions (``[lat, lng]``), centre, bounds
- **viewport**: fit mode, padding, zoom
- **style**: polygon colour, opacity, weight
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Schema version for forward compatibility
SCHEMA_VERSION = "map-view-v1"


class GeometrySection(BaseModel):
    """Geometry section of the map view payload.

    Attributes:
        positions: Ring points as ``[lat, lng]`` pairs; empty when there is
            no boundary.
        center: Display centre as ``[lat, lng]``.
        center_source: ``"ring"``, ``"manual"`` or ``"default"``.
        bounds: ``[[south, west], [north, east]]`` or ``None``.
        point_count: Number of ring points.
    """

    positions: list[list[float]] = Field(default_factory=list)
    center: list[float] = Field(default_factory=list)
    center_source: str = "default"
    bounds: list[list[float]] | None = None
    point_count: int = 0


class ViewportSection(BaseModel):
    """Viewport section of the map view payload."""

    mode: str = "center"
    padding_px: float = 0.0
    zoom: int | None = None


class StyleSection(BaseModel):
    """Style section of the map view payload."""

    color: str = ""
    fill_color: str = ""
    opacity: float = 0.0
    fill_opacity: float = 0.0
    weight: float = 0.0


class MapViewPayload(BaseModel):
    """Top-level map view document.

    Attributes:
        schema_version: Schema identifier for forward compatibility.
        name: Name of the source record.
        has_boundary: Whether a ring is present.
        has_location: ``False`` when the UI should show its neutral
            "no location data" state.
        geometry: Ring and derived points.
        viewport: Fit instruction.
        style: Polygon style.
        form_prefill: ``{"lat", "lng"}`` to pre-fill the form with, if any.
    """

    schema_version: str = Field(default=SCHEMA_VERSION, alias="$schema")
    name: str = ""
    has_boundary: bool = False
    has_location: bool = False
    geometry: GeometrySection = Field(default_factory=GeometrySection)
    viewport: ViewportSection = Field(default_factory=ViewportSection)
    style: StyleSection = Field(default_factory=StyleSection)
    form_prefill: dict[str, float] | None = None

    model_config = {"populate_by_name": True}

    @classmethod
    def from_map_view(cls, view: object) -> MapViewPayload:
        """Construct a payload from a ``MapView`` dataclass."""
        from sector_boundaries.models.map_view import MapView as MapViewModel

        if not isinstance(view, MapViewModel):
            msg = f"Expected MapView instance, got {type(view).__name__}"
            raise TypeError(msg)

        return cls(
            name=view.name,
            has_boundary=view.has_boundary,
            has_location=view.has_location,
            geometry=GeometrySection(
                positions=view.ring.to_positions() if view.ring is not None else [],
                center=view.center.to_pair(),
                center_source=view.center_source.value,
                bounds=view.region.bounds.to_corners() if view.region else None,
                point_count=view.point_count,
            ),
            viewport=ViewportSection(
                mode=view.fit.mode.value,
                padding_px=view.region.padding_px if view.region else 0.0,
                zoom=view.fit.zoom,
            ),
            style=StyleSection(**view.style.to_dict()),
            form_prefill=view.form_prefill.to_dict() if view.form_prefill else None,
        )

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise to a JSON string using the ``$schema`` alias."""
        return self.model_dump_json(indent=indent, by_alias=True)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return self.model_dump(by_alias=True)  # type: ignore[return-value]
