"""Network analysis operations: service areas, closest facility and routes."""

from __future__ import annotations

from .closest_facility import closest_facility
from .helpers import decompress_geometry
from .locations import normalize_location, normalize_locations
from .service_area import service_area
from .solve_route import solve_route

__all__ = [
    "closest_facility",
    "decompress_geometry",
    "normalize_location",
    "normalize_locations",
    "service_area",
    "solve_route",
]
