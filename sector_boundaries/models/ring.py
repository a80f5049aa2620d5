"""Data model for a canonical boundary ring.

A ``CanonicalRing`` is the normalised outer boundary of a sector,
subsector or cuadrante: the filtered, axis-swapped points of whatever
shape was stored.  It is never empty; "no boundary" is represented by the
absence of a ring, not by a ring with zero points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sector_boundaries.core.exceptions import EmptyRingError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sector_boundaries.models.point import LatLng


@dataclass(frozen=True, slots=True)
class CanonicalRing:
    """An ordered, non-empty sequence of ``LatLng`` points.

    Insertion order is preserved.  First and last points are not required
    to be equal.

    Raises:
        EmptyRingError: If constructed with no points.
    """

    points: tuple[LatLng, ...]

    def __post_init__(self) -> None:
        if not self.points:
            msg = "CanonicalRing requires at least one point"
            raise EmptyRingError(msg)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[LatLng]:
        return iter(self.points)

    def __getitem__(self, index: int) -> LatLng:
        return self.points[index]

    def to_positions(self) -> list[list[float]]:
        """Return ``[[lat, lng], ...]`` for a map polygon layer."""
        return [p.to_pair() for p in self.points]

    def to_geojson_ring(self) -> list[list[float]]:
        """Return ``[[lng, lat], ...]`` (GeoJSON axis order)."""
        return [p.to_geojson() for p in self.points]
