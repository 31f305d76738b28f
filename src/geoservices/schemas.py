"""Shared typed shapes for service payloads.

Response models keep unknown fields (``extra="allow"``) because services add
keys freely; only the documented ones get attributes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_wire(self) -> dict[str, Any]:
        """Dump with the service's own key names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SpatialReference(ServiceModel):
    wkid: int | None = None
    latest_wkid: int | None = Field(default=None, alias="latestWkid")
    wkt: str | None = None


class Feature(ServiceModel):
    attributes: dict[str, Any] = Field(default_factory=dict)
    geometry: dict[str, Any] | None = None


class FeatureSet(ServiceModel):
    features: list[Feature] = Field(default_factory=list)
    geometry_type: str | None = Field(default=None, alias="geometryType")
    spatial_reference: SpatialReference | None = Field(default=None, alias="spatialReference")
    fields: list[dict[str, Any]] | None = None
    exceeded_transfer_limit: bool | None = Field(default=None, alias="exceededTransferLimit")
    geo_json: dict[str, Any] | None = Field(default=None, alias="geoJson")


class EditResult(ServiceModel):
    """Outcome for one submitted feature; ``success`` may be False per item."""

    object_id: int | None = Field(default=None, alias="objectId")
    global_id: str | None = Field(default=None, alias="globalId")
    success: bool
    error: dict[str, Any] | None = None
