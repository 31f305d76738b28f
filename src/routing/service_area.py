"""Service area solve: regions reachable from facilities within given breaks."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from geoservices.auth import Authentication
from geoservices.params import merge_params, trim_url
from geoservices.settings import GeoservicesSettings, get_settings
from geoservices.transport import send

from .helpers import (
    require_authentication,
    resolve_authentication,
    shape_solve_response,
    travel_direction_param,
)
from .locations import encode_locations
from .schemas import Location, LocationsInput, ServiceAreaResponse, TravelDirection

SERVICE_AREA_DEFAULTS: Mapping[str, Any] = {
    "returnFacilities": True,
    "returnBarriers": True,
    "preserveObjectID": True,
    "returnPolylineBarriers": True,
    "returnPolygonBarriers": True,
}

AUTH_MESSAGE = "Finding service areas using the ArcGIS service requires authentication"

DISPLAY_OUTPUTS = ("saPolygons", "saPolylines")


def service_area(
    *,
    facilities: LocationsInput,
    endpoint: str | None = None,
    travel_direction: TravelDirection | None = None,
    barriers: Sequence[Location] | None = None,
    polyline_barriers: Mapping[str, Any] | None = None,
    polygon_barriers: Mapping[str, Any] | None = None,
    return_facilities: bool | None = None,
    return_barriers: bool | None = None,
    return_polyline_barriers: bool | None = None,
    return_polygon_barriers: bool | None = None,
    preserve_object_id: bool | None = None,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> ServiceAreaResponse:
    settings = settings or get_settings()
    base = trim_url(endpoint or settings.service_area_url)
    authentication = resolve_authentication(authentication, settings)
    require_authentication(base, authentication, AUTH_MESSAGE)

    effective = merge_params(
        SERVICE_AREA_DEFAULTS,
        params,
        {
            "returnFacilities": return_facilities,
            "returnBarriers": return_barriers,
            "returnPolylineBarriers": return_polyline_barriers,
            "returnPolygonBarriers": return_polygon_barriers,
            "preserveObjectID": preserve_object_id,
            "travelDirection": travel_direction_param(travel_direction),
            "facilities": encode_locations(facilities),
            "barriers": encode_locations(barriers) if barriers is not None else None,
            "polylineBarriers": polyline_barriers,
            "polygonBarriers": polygon_barriers,
        },
    )
    data = send(f"{base}/solveServiceArea", "POST", effective, authentication, client=client, settings=settings)
    return ServiceAreaResponse.model_validate(shape_solve_response(data, DISPLAY_OUTPUTS))
