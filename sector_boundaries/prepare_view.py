"""Map view preparation for a boundary record.

Both the boundary editor modal and the read-only map modal call this one
entry point, so the two always agree on ring, centre and framing.

Steps:
- Normalise the stored boundary to a canonical ring (or none).
- Pick the display centre: ring centroid, else manual coordinates, else
  the configured default anchor.
- Compute the fit region and viewport instruction.
- Resolve the polygon style and the form pre-fill.

Bad boundary data never raises here; it produces a view centred on the
manual coordinates or the default anchor, which the UI shows as its
neutral "no location data" state.
"""

from __future__ import annotations

import logging

from sector_boundaries.core.config import GeometryConfig
from sector_boundaries.geometry.derive import bounding_region, coerce_coordinate, resolve_center
from sector_boundaries.models.map_view import CenterSource, MapView
from sector_boundaries.models.record import BoundaryRecord
from sector_boundaries.normalization import Empty, parse_boundary
from sector_boundaries.viewport.plan import build_style, plan_fit

logger = logging.getLogger("sector_boundaries.prepare_view")


def prepare_map_view(
    record: BoundaryRecord,
    *,
    config: GeometryConfig | None = None,
) -> MapView:
    """Build the map view for *record*.

    Args:
        record: Boundary fields of a sector, subsector or cuadrante.
        config: Default anchor, zoom, padding and colour.  Defaults to
            ``GeometryConfig()``.

    Returns:
        A ``MapView``.  ``form_prefill`` is the ring centroid when the
        record has a ring but no manual coordinates, otherwise ``None``.
    """
    config = config or GeometryConfig()

    result = parse_boundary(record.poligono_json)
    if isinstance(result, Empty):
        ring = None
        logger.debug("No boundary for %s '%s': %s", record.kind, record.name, result.reason.value)
    else:
        ring = result.ring

    center, source = resolve_center(
        ring, record.latitud, record.longitud, config.default_point
    )
    region = bounding_region(ring, config.fit_padding_px)
    fit = plan_fit(ring, center, config.fit_padding_px, default_zoom=config.default_zoom)
    style = build_style(record.color_mapa, default_color=config.default_color)

    has_manual = (
        coerce_coordinate(record.latitud) is not None
        and coerce_coordinate(record.longitud) is not None
    )
    form_prefill = center if source is CenterSource.RING and not has_manual else None

    logger.info(
        "Map view prepared | %s=%s | points=%d | center=(%.6f, %.6f) | source=%s | fit=%s",
        record.kind,
        record.name,
        len(ring) if ring is not None else 0,
        center.lat,
        center.lng,
        source.value,
        fit.mode.value,
    )

    return MapView(
        name=record.name,
        ring=ring,
        center=center,
        center_source=source,
        region=region,
        fit=fit,
        style=style,
        form_prefill=form_prefill,
    )


def prepare_map_view_payload(
    data: dict[str, object],
    *,
    config: GeometryConfig | None = None,
) -> dict[str, object]:
    """Build the JSON-ready map view document for a backend row.

    Raises:
        TypeError: If *data* is not a valid record mapping.
    """
    record = BoundaryRecord.from_dict(data)
    return prepare_map_view(record, config=config).to_payload().to_dict()
