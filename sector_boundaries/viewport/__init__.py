"""Viewport contract with the map-rendering collaborator.

- plan: pure decision of how to frame a view, and polygon style
- base: ``ViewportFitter`` abstract base the map widget implements
"""

from sector_boundaries.viewport.base import ViewportFitter
from sector_boundaries.viewport.plan import build_style, plan_fit

__all__ = [
    "ViewportFitter",
    "build_style",
    "plan_fit",
]
