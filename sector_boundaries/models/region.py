"""Data model for the rectangle a map view is framed to contain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BoundingRegion:
    """Minimal axis-aligned lat/lng rectangle covering a ring.

    Attributes:
        south: Minimum latitude.
        west: Minimum longitude.
        north: Maximum latitude.
        east: Maximum longitude.
    """

    south: float
    west: float
    north: float
    east: float

    @property
    def is_degenerate(self) -> bool:
        """Whether the rectangle has zero extent on both axes (a single point)."""
        return self.south == self.north and self.west == self.east

    def to_corners(self) -> list[list[float]]:
        """Return ``[[south, west], [north, east]]`` (Leaflet bounds format)."""
        return [[self.south, self.west], [self.north, self.east]]

    def to_dict(self) -> dict[str, float]:
        return {
            "south": self.south,
            "west": self.west,
            "north": self.north,
            "east": self.east,
        }


@dataclass(frozen=True, slots=True)
class FitRegion:
    """A ``BoundingRegion`` plus the screen-space padding for fitting it.

    The padding is a pixel hint for the renderer; it is never applied to
    the coordinate values.
    """

    bounds: BoundingRegion
    padding_px: float

    def to_dict(self) -> dict[str, object]:
        return {
            "bounds": self.bounds.to_dict(),
            "padding_px": self.padding_px,
        }
