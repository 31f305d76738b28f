"""Typed inputs and results for network analysis operations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal, NamedTuple

from pydantic import BaseModel, Field

from geoservices.schemas import FeatureSet, ServiceModel, SpatialReference

TravelDirection = Literal["incidentsToFacilities", "facilitiesToIncidents"]


class CoordinatePair(NamedTuple):
    """x is longitude, y is latitude."""

    x: float
    y: float


class Point(ServiceModel):
    x: float
    y: float
    z: float | None = None
    spatial_reference: SpatialReference | None = Field(default=None, alias="spatialReference")


class LatLong(BaseModel):
    lat: float
    long: float


class LatitudeLongitude(BaseModel):
    latitude: float
    longitude: float


Location = Sequence[float] | Mapping[str, Any] | Point | LatLong | LatitudeLongitude
LocationsInput = Sequence[Location] | FeatureSet | Mapping[str, Any]


class DirectionsFeature(ServiceModel):
    attributes: dict[str, Any] = Field(default_factory=dict)
    compressed_geometry: str | None = Field(default=None, alias="compressedGeometry")
    geometry: dict[str, Any] | None = None


class Directions(ServiceModel):
    route_id: int | None = Field(default=None, alias="routeId")
    route_name: str | None = Field(default=None, alias="routeName")
    summary: dict[str, Any] | None = None
    features: list[DirectionsFeature] = Field(default_factory=list)


class ServiceAreaResponse(ServiceModel):
    sa_polygons: FeatureSet | None = Field(default=None, alias="saPolygons")
    sa_polylines: FeatureSet | None = Field(default=None, alias="saPolylines")
    facilities: FeatureSet | None = None
    barriers: FeatureSet | None = None
    polyline_barriers: FeatureSet | None = Field(default=None, alias="polylineBarriers")
    polygon_barriers: FeatureSet | None = Field(default=None, alias="polygonBarriers")
    messages: list[dict[str, Any]] = Field(default_factory=list)


class SolveRouteResponse(ServiceModel):
    routes: FeatureSet | None = None
    stops: FeatureSet | None = None
    directions: list[Directions] = Field(default_factory=list)
    barriers: FeatureSet | None = None
    polyline_barriers: FeatureSet | None = Field(default=None, alias="polylineBarriers")
    polygon_barriers: FeatureSet | None = Field(default=None, alias="polygonBarriers")
    messages: list[dict[str, Any]] = Field(default_factory=list)


class ClosestFacilityResponse(ServiceModel):
    routes: FeatureSet | None = None
    facilities: FeatureSet | None = None
    incidents: FeatureSet | None = None
    directions: list[Directions] = Field(default_factory=list)
    barriers: FeatureSet | None = None
    polyline_barriers: FeatureSet | None = Field(default=None, alias="polylineBarriers")
    polygon_barriers: FeatureSet | None = Field(default=None, alias="polygonBarriers")
    messages: list[dict[str, Any]] = Field(default_factory=list)
