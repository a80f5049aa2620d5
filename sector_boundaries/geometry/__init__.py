"""Derived geometry - centroid, display centre and fit region.

All arithmetic is planar on raw degrees; nothing here is geodesic or
projected.
"""

from sector_boundaries.geometry.derive import (
    bounding_region,
    centroid,
    coerce_coordinate,
    display_center,
    has_valid_location,
    resolve_center,
)

__all__ = [
    "bounding_region",
    "centroid",
    "coerce_coordinate",
    "display_center",
    "has_valid_location",
    "resolve_center",
]
