"""Shared constants - single source of truth.

Values mirror what the sector/cuadrante map modals used before the
geometry logic was consolidated here.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Default viewport anchor (Santiago de Surco, Lima)
# ---------------------------------------------------------------------------

DEFAULT_CENTER_LAT: float = -12.1328
DEFAULT_CENTER_LNG: float = -76.9853

DEFAULT_ZOOM: int = 15
"""Zoom used whenever the map centres on a point instead of fitting a ring."""

MIN_ZOOM: int = 0
MAX_ZOOM: int = 22

DEFAULT_FIT_PADDING_PX: float = 30.0
"""Screen-space padding around a fitted ring, in pixels."""

# ---------------------------------------------------------------------------
# Polygon style
# ---------------------------------------------------------------------------

DEFAULT_MAP_COLOR: str = "#108981"
DEFAULT_STROKE_WEIGHT: float = 3.0
DEFAULT_STROKE_OPACITY: float = 0.9
DEFAULT_FILL_OPACITY: float = 0.3

HEX_COLOR_PATTERN: str = r"^#[0-9A-Fa-f]{6}$"

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
