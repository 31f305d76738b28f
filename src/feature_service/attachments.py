"""Attachment operations for a single feature.

Attachment payloads are handed to the transport untouched; httpx accepts raw
bytes, an open file or a ``(filename, file, content_type)`` tuple.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from geoservices import InvalidArgumentError
from geoservices.auth import Authentication
from geoservices.params import merge_params, trim_url
from geoservices.settings import GeoservicesSettings
from geoservices.transport import send

from .schemas import AddAttachmentResult, DeleteAttachmentsResult, GetAttachmentsResult, UpdateAttachmentResult


def _feature_url(url: str, id: int | None) -> str:
    if id is None:
        raise InvalidArgumentError("A feature id is required")
    return f"{trim_url(url)}/{id}"


def get_attachments(
    *,
    url: str,
    id: int,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> GetAttachmentsResult:
    data = send(
        f"{_feature_url(url, id)}/attachments",
        "GET",
        merge_params({}, params),
        authentication,
        client=client,
        settings=settings,
    )
    return GetAttachmentsResult.model_validate(data)


def add_attachment(
    *,
    url: str,
    id: int,
    attachment: Any,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> AddAttachmentResult:
    if attachment is None:
        raise InvalidArgumentError("An attachment is required")
    data = send(
        f"{_feature_url(url, id)}/addAttachment",
        "POST",
        merge_params({}, params),
        authentication,
        files={"attachment": attachment},
        client=client,
        settings=settings,
    )
    return AddAttachmentResult.model_validate(data)


def update_attachment(
    *,
    url: str,
    id: int,
    attachment_id: int,
    attachment: Any,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> UpdateAttachmentResult:
    if attachment is None:
        raise InvalidArgumentError("An attachment is required")
    data = send(
        f"{_feature_url(url, id)}/updateAttachment",
        "POST",
        merge_params({}, params, {"attachmentId": attachment_id}),
        authentication,
        files={"attachment": attachment},
        client=client,
        settings=settings,
    )
    return UpdateAttachmentResult.model_validate(data)


def delete_attachments(
    *,
    url: str,
    id: int,
    attachment_ids: Sequence[int],
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> DeleteAttachmentsResult:
    data = send(
        f"{_feature_url(url, id)}/deleteAttachments",
        "POST",
        merge_params({}, params, {"attachmentIds": list(attachment_ids)}),
        authentication,
        client=client,
        settings=settings,
    )
    return DeleteAttachmentsResult.model_validate(data)
