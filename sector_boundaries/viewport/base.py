"""ViewportFitter abstract base class.

Defines what the map-rendering collaborator must provide so the geometry
code can frame a view without knowing which map library is behind it.

Lifecycle:
    1. ``request_fit(ring, center, padding_px)``: called by the host
       whenever the boundary or manual coordinates change.
    2. ``fit_bounds(region)``: implemented by the collaborator; frames the
       map around the region with the region's pixel padding.
    3. ``set_view(center, zoom)``: implemented by the collaborator; centres
       the map on a point.

``request_fit`` is idempotent: calling it again with the same inputs
issues the same calls.
"""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING

from sector_boundaries.core.constants import DEFAULT_ZOOM
from sector_boundaries.core.exceptions import ViewportFitError
from sector_boundaries.models.map_view import FitInstruction, FitMode
from sector_boundaries.viewport.plan import plan_fit

if TYPE_CHECKING:
    from sector_boundaries.models.point import LatLng
    from sector_boundaries.models.region import FitRegion
    from sector_boundaries.models.ring import CanonicalRing

logger = logging.getLogger("sector_boundaries.viewport")


class ViewportFitter(abc.ABC):
    """Abstract base class for map viewport adapters.

    Concrete implementations override ``fit_bounds`` and ``set_view``.

    Example usage::

        fitter = LeafletFitter(map_widget)
        fitter.request_fit(view.ring, view.center, view.region.padding_px)
    """

    def __init__(self, *, default_zoom: int = DEFAULT_ZOOM) -> None:
        self._default_zoom = default_zoom

    @property
    def default_zoom(self) -> int:
        """Zoom used when centring on a point."""
        return self._default_zoom

    # ------------------------------------------------------------------
    # Abstract methods, every adapter must implement these
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def fit_bounds(self, region: FitRegion) -> None:
        """Frame the map so every point of *region* is visible.

        Raises:
            ViewportFitError: If the region cannot be framed.
        """

    @abc.abstractmethod
    def set_view(self, center: LatLng, zoom: int) -> None:
        """Centre the map on *center* at *zoom*."""

    # ------------------------------------------------------------------
    # Template method
    # ------------------------------------------------------------------

    def request_fit(
        self,
        ring: CanonicalRing | None,
        center: LatLng,
        padding_px: float,
    ) -> FitInstruction:
        """Frame the map around *ring*, falling back to *center*.

        With a ring, the map is fitted to the ring's bounds plus
        *padding_px*.  If the ring has no extent, or the adapter raises
        ``ViewportFitError``, the map is centred on *center* at the default
        zoom instead.  Without a ring the map is centred directly.

        Returns:
            The instruction that was applied.
        """
        instruction = plan_fit(ring, center, padding_px, default_zoom=self._default_zoom)

        if instruction.mode is FitMode.FIT_BOUNDS and instruction.region is not None:
            try:
                self.fit_bounds(instruction.region)
            except ViewportFitError as exc:
                logger.warning(
                    "Fit failed, centring on (%.6f, %.6f) at zoom %d: %s",
                    center.lat,
                    center.lng,
                    self._default_zoom,
                    exc,
                )
                instruction = FitInstruction(
                    mode=FitMode.CENTER, center=center, zoom=self._default_zoom
                )
            else:
                return instruction

        self.set_view(center, self._default_zoom)
        return instruction
