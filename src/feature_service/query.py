"""Read operations on a feature layer. Both issue GET."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

import httpx

from geoservices import InvalidArgumentError, TransportError
from geoservices.auth import Authentication
from geoservices.params import merge_params, trim_url
from geoservices.schemas import Feature
from geoservices.settings import GeoservicesSettings
from geoservices.shaping import shape_response
from geoservices.transport import send

from .schemas import QueryFeaturesResponse, StatisticDefinition

QUERY_DEFAULTS: Mapping[str, Any] = {"where": "1=1", "outFields": "*"}


def get_feature(
    *,
    url: str,
    id: int,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> Feature:
    """Fetch one feature by object id and return it without its envelope."""
    if id is None:
        raise InvalidArgumentError("A feature id is required")
    base = trim_url(url)
    data = send(
        f"{base}/{id}",
        "GET",
        merge_params({}, params),
        authentication,
        client=client,
        settings=settings,
    )
    if not isinstance(data.get("feature"), Mapping):
        raise TransportError("BAD_RESPONSE", "Response did not contain a feature", {"url": f"{base}/{id}"})
    return Feature.model_validate(data["feature"])


def query_features(
    *,
    url: str,
    where: str | None = None,
    out_fields: str | Sequence[str] | None = None,
    object_ids: Sequence[int] | None = None,
    geometry: Mapping[str, Any] | None = None,
    geometry_type: str | None = None,
    spatial_rel: str | None = None,
    in_sr: int | Mapping[str, Any] | None = None,
    out_sr: int | Mapping[str, Any] | None = None,
    return_geometry: bool | None = None,
    order_by_fields: str | None = None,
    group_by_fields_for_statistics: str | None = None,
    out_statistics: Sequence[StatisticDefinition | Mapping[str, Any]] | None = None,
    time: datetime | Sequence[datetime] | None = None,
    result_offset: int | None = None,
    result_record_count: int | None = None,
    return_ids_only: bool | None = None,
    return_count_only: bool | None = None,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> QueryFeaturesResponse:
    """Query a layer; ``where`` defaults to ``1=1`` and ``outFields`` to ``*``."""
    base = trim_url(url)
    effective = merge_params(
        QUERY_DEFAULTS,
        params,
        {
            "where": where,
            "outFields": out_fields,
            "objectIds": object_ids,
            "geometry": geometry,
            "geometryType": geometry_type,
            "spatialRel": spatial_rel,
            "inSR": in_sr,
            "outSR": out_sr,
            "returnGeometry": return_geometry,
            "orderByFields": order_by_fields,
            "groupByFieldsForStatistics": group_by_fields_for_statistics,
            "outStatistics": out_statistics,
            "time": time,
            "resultOffset": result_offset,
            "resultRecordCount": result_record_count,
            "returnIdsOnly": return_ids_only,
            "returnCountOnly": return_count_only,
        },
    )
    data = send(f"{base}/query", "GET", effective, authentication, client=client, settings=settings)
    return QueryFeaturesResponse.model_validate(shape_response(data))
