"""Typed inputs and results for feature layer operations."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from geoservices.schemas import EditResult, FeatureSet, ServiceModel

StatisticType = Literal["count", "sum", "min", "max", "avg", "stddev", "var"]


class StatisticDefinition(ServiceModel):
    """One entry of ``outStatistics``."""

    statistic_type: StatisticType = Field(alias="statisticType")
    on_statistic_field: str = Field(alias="onStatisticField")
    out_statistic_field_name: str | None = Field(default=None, alias="outStatisticFieldName")


class QueryFeaturesResponse(FeatureSet):
    object_id_field_name: str | None = Field(default=None, alias="objectIdFieldName")
    global_id_field_name: str | None = Field(default=None, alias="globalIdFieldName")
    object_ids: list[int] | None = Field(default=None, alias="objectIds")
    count: int | None = None
    extent: dict[str, Any] | None = None


class AddFeaturesResult(ServiceModel):
    add_results: list[EditResult] = Field(default_factory=list, alias="addResults")


class UpdateFeaturesResult(ServiceModel):
    update_results: list[EditResult] = Field(default_factory=list, alias="updateResults")


class DeleteFeaturesResult(ServiceModel):
    delete_results: list[EditResult] = Field(default_factory=list, alias="deleteResults")


class ApplyEditsResult(ServiceModel):
    add_results: list[EditResult] = Field(default_factory=list, alias="addResults")
    update_results: list[EditResult] = Field(default_factory=list, alias="updateResults")
    delete_results: list[EditResult] = Field(default_factory=list, alias="deleteResults")


class AttachmentInfo(ServiceModel):
    id: int
    content_type: str | None = Field(default=None, alias="contentType")
    size: int | None = None
    name: str | None = None
    global_id: str | None = Field(default=None, alias="globalId")


class GetAttachmentsResult(ServiceModel):
    attachment_infos: list[AttachmentInfo] = Field(default_factory=list, alias="attachmentInfos")


class AddAttachmentResult(ServiceModel):
    add_attachment_result: EditResult = Field(alias="addAttachmentResult")


class UpdateAttachmentResult(ServiceModel):
    update_attachment_result: EditResult = Field(alias="updateAttachmentResult")


class DeleteAttachmentsResult(ServiceModel):
    delete_attachment_results: list[EditResult] = Field(default_factory=list, alias="deleteAttachmentResults")
