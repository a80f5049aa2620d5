"""Viewport planning and polygon styling.

``plan_fit`` decides, as data, what the map collaborator should do:
fit the ring's bounds with pixel padding, or centre on a point at the
default zoom.  A ring whose points are all identical has no extent to
fit, so it is centred instead.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from sector_boundaries.core.constants import (
    DEFAULT_FILL_OPACITY,
    DEFAULT_MAP_COLOR,
    DEFAULT_STROKE_OPACITY,
    DEFAULT_STROKE_WEIGHT,
    DEFAULT_ZOOM,
    HEX_COLOR_PATTERN,
)
from sector_boundaries.geometry.derive import bounding_region
from sector_boundaries.models.map_view import FitInstruction, FitMode, PolygonStyle

if TYPE_CHECKING:
    from sector_boundaries.models.point import LatLng
    from sector_boundaries.models.ring import CanonicalRing

logger = logging.getLogger("sector_boundaries.viewport")


def plan_fit(
    ring: CanonicalRing | None,
    center: LatLng,
    padding_px: float,
    *,
    default_zoom: int = DEFAULT_ZOOM,
) -> FitInstruction:
    """Decide how the map should frame *ring* / *center*.

    Args:
        ring: Canonical ring, or ``None``.
        center: Display centre; used directly when there is no ring and as
            the fallback when the ring cannot be fitted.
        padding_px: Screen-space padding for a bounds fit.
        default_zoom: Zoom for centring on a point.

    Returns:
        ``FIT_BOUNDS`` with a region when the ring has extent, otherwise
        ``CENTER`` at *default_zoom*.
    """
    region = bounding_region(ring, padding_px)
    if region is None:
        return FitInstruction(mode=FitMode.CENTER, center=center, zoom=default_zoom)
    if region.bounds.is_degenerate:
        logger.debug("Ring has no extent, centring at zoom %d instead of fitting", default_zoom)
        return FitInstruction(mode=FitMode.CENTER, center=center, zoom=default_zoom)
    return FitInstruction(mode=FitMode.FIT_BOUNDS, center=center, region=region)


def build_style(
    color: str | None,
    *,
    default_color: str = DEFAULT_MAP_COLOR,
    opacity: float = DEFAULT_STROKE_OPACITY,
    fill_opacity: float = DEFAULT_FILL_OPACITY,
    weight: float = DEFAULT_STROKE_WEIGHT,
) -> PolygonStyle:
    """Build the polygon style for a record colour.

    An empty colour uses *default_color*.  A colour that is not ``#RRGGBB``
    is logged and replaced by *default_color* rather than rejected; the
    map is display-only.
    """
    resolved = color or default_color
    if not re.match(HEX_COLOR_PATTERN, resolved):
        logger.warning("Invalid map colour %r, using default %s", resolved, default_color)
        resolved = default_color
    return PolygonStyle(
        color=resolved,
        fill_color=resolved,
        opacity=opacity,
        fill_opacity=fill_opacity,
        weight=weight,
    )
