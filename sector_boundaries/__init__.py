"""Sector boundary geometry.

Normalises the polygon boundaries stored for sectors, subsectors and
cuadrantes, and derives the centroid, display centre and fit region that
the map widgets and coordinate forms need.
"""

__version__ = "0.1.0"
