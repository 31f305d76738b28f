"""Route solve between ordered stops."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from geoservices.auth import Authentication
from geoservices.params import merge_params, trim_url
from geoservices.settings import GeoservicesSettings, get_settings
from geoservices.transport import send

from .helpers import require_authentication, resolve_authentication, shape_solve_response
from .locations import encode_locations
from .schemas import Location, LocationsInput, SolveRouteResponse

ROUTE_DEFAULTS: Mapping[str, Any] = {
    "returnDirections": True,
    "returnRoutes": True,
}

AUTH_MESSAGE = "Routing using the ArcGIS service requires authentication"

DISPLAY_OUTPUTS = ("routes",)


def solve_route(
    *,
    stops: LocationsInput,
    endpoint: str | None = None,
    barriers: Sequence[Location] | None = None,
    polyline_barriers: Mapping[str, Any] | None = None,
    polygon_barriers: Mapping[str, Any] | None = None,
    return_directions: bool | None = None,
    return_routes: bool | None = None,
    return_stops: bool | None = None,
    return_barriers: bool | None = None,
    return_polyline_barriers: bool | None = None,
    return_polygon_barriers: bool | None = None,
    preserve_object_id: bool | None = None,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> SolveRouteResponse:
    """Solve a route through ``stops`` in the given order.

    Direction features come back with ``compressedGeometry``; each one also
    gets a decoded polyline ``geometry``.
    """
    settings = settings or get_settings()
    base = trim_url(endpoint or settings.route_url)
    authentication = resolve_authentication(authentication, settings)
    require_authentication(base, authentication, AUTH_MESSAGE)

    effective = merge_params(
        ROUTE_DEFAULTS,
        params,
        {
            "returnDirections": return_directions,
            "returnRoutes": return_routes,
            "returnStops": return_stops,
            "returnBarriers": return_barriers,
            "returnPolylineBarriers": return_polyline_barriers,
            "returnPolygonBarriers": return_polygon_barriers,
            "preserveObjectID": preserve_object_id,
            "stops": encode_locations(stops),
            "barriers": encode_locations(barriers) if barriers is not None else None,
            "polylineBarriers": polyline_barriers,
            "polygonBarriers": polygon_barriers,
        },
    )
    data = send(f"{base}/solve", "POST", effective, authentication, client=client, settings=settings)
    return SolveRouteResponse.model_validate(shape_solve_response(data, DISPLAY_OUTPUTS))
