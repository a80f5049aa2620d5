"""Geometry configuration loaded from environment variables.

All values have defaults matching the map modals of the admin UI, so
``GeometryConfig()`` is usable as-is.  Deployments override the default
anchor and framing through the environment.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range, so a bad setting is caught at startup rather than on
    the first map render.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from sector_boundaries.core.constants import (
    DEFAULT_CENTER_LAT,
    DEFAULT_CENTER_LNG,
    DEFAULT_FIT_PADDING_PX,
    DEFAULT_MAP_COLOR,
    DEFAULT_ZOOM,
    HEX_COLOR_PATTERN,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MAX_ZOOM,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_ZOOM,
)
from sector_boundaries.core.exceptions import ValidationError
from sector_boundaries.models.point import LatLng


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        self.message = message
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """Immutable geometry configuration.

    Attributes:
        default_lat: Latitude of the fallback map anchor.
        default_lng: Longitude of the fallback map anchor.
        default_zoom: Zoom used when centring on a point.
        fit_padding_px: Screen-space padding when fitting a ring.
        default_color: Polygon colour when a record has none (``#RRGGBB``).
    """

    default_lat: float = DEFAULT_CENTER_LAT
    default_lng: float = DEFAULT_CENTER_LNG
    default_zoom: int = DEFAULT_ZOOM
    fit_padding_px: float = DEFAULT_FIT_PADDING_PX
    default_color: str = DEFAULT_MAP_COLOR

    @property
    def default_point(self) -> LatLng:
        """The fallback anchor as a ``LatLng``."""
        return LatLng(lat=self.default_lat, lng=self.default_lng)

    @classmethod
    def from_env(cls) -> GeometryConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``MAP_DEFAULT_ZOOM=abc``).
        """
        config = cls(
            default_lat=float(os.getenv("MAP_DEFAULT_LAT", str(DEFAULT_CENTER_LAT))),
            default_lng=float(os.getenv("MAP_DEFAULT_LNG", str(DEFAULT_CENTER_LNG))),
            default_zoom=int(os.getenv("MAP_DEFAULT_ZOOM", str(DEFAULT_ZOOM))),
            fit_padding_px=float(os.getenv("MAP_FIT_PADDING_PX", str(DEFAULT_FIT_PADDING_PX))),
            default_color=os.getenv("MAP_DEFAULT_COLOR", DEFAULT_MAP_COLOR),
        )
        _validate(config)
        return config


def _validate(config: GeometryConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not MIN_LATITUDE <= config.default_lat <= MAX_LATITUDE:
        raise ConfigValidationError(
            "MAP_DEFAULT_LAT",
            config.default_lat,
            f"must be between {MIN_LATITUDE} and {MAX_LATITUDE} (degrees)",
        )

    if not MIN_LONGITUDE <= config.default_lng <= MAX_LONGITUDE:
        raise ConfigValidationError(
            "MAP_DEFAULT_LNG",
            config.default_lng,
            f"must be between {MIN_LONGITUDE} and {MAX_LONGITUDE} (degrees)",
        )

    if not MIN_ZOOM <= config.default_zoom <= MAX_ZOOM:
        raise ConfigValidationError(
            "MAP_DEFAULT_ZOOM",
            config.default_zoom,
            f"must be between {MIN_ZOOM} and {MAX_ZOOM}",
        )

    if config.fit_padding_px < 0:
        raise ConfigValidationError(
            "MAP_FIT_PADDING_PX",
            config.fit_padding_px,
            "must be >= 0 (pixels)",
        )

    if not re.match(HEX_COLOR_PATTERN, config.default_color):
        raise ConfigValidationError(
            "MAP_DEFAULT_COLOR",
            config.default_color,
            "must be a #RRGGBB hex colour",
        )
