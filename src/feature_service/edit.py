"""Edit operations on a feature layer.

Edits always POST. A batch can partly fail: each entry of the result carries
its own ``success`` flag and the call still returns normally.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from geoservices import InvalidArgumentError
from geoservices.auth import Authentication
from geoservices.params import merge_params, trim_url
from geoservices.schemas import Feature
from geoservices.settings import GeoservicesSettings
from geoservices.transport import send

from .schemas import AddFeaturesResult, ApplyEditsResult, DeleteFeaturesResult, UpdateFeaturesResult

FeatureInput = Feature | Mapping[str, Any]


def _edit_options(
    gdb_version: str | None,
    return_edit_moment: bool | None,
    rollback_on_failure: bool | None,
) -> dict[str, Any]:
    return {
        "gdbVersion": gdb_version,
        "returnEditMoment": return_edit_moment,
        "rollbackOnFailure": rollback_on_failure,
    }


def add_features(
    *,
    url: str,
    features: Sequence[FeatureInput],
    gdb_version: str | None = None,
    return_edit_moment: bool | None = None,
    rollback_on_failure: bool | None = None,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> AddFeaturesResult:
    base = trim_url(url)
    options = _edit_options(gdb_version, return_edit_moment, rollback_on_failure)
    options["features"] = list(features)
    data = send(
        f"{base}/addFeatures",
        "POST",
        merge_params({}, params, options),
        authentication,
        client=client,
        settings=settings,
    )
    return AddFeaturesResult.model_validate(data)


def update_features(
    *,
    url: str,
    features: Sequence[FeatureInput],
    gdb_version: str | None = None,
    return_edit_moment: bool | None = None,
    rollback_on_failure: bool | None = None,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> UpdateFeaturesResult:
    base = trim_url(url)
    options = _edit_options(gdb_version, return_edit_moment, rollback_on_failure)
    options["features"] = list(features)
    data = send(
        f"{base}/updateFeatures",
        "POST",
        merge_params({}, params, options),
        authentication,
        client=client,
        settings=settings,
    )
    return UpdateFeaturesResult.model_validate(data)


def delete_features(
    *,
    url: str,
    object_ids: Sequence[int] | None = None,
    where: str | None = None,
    gdb_version: str | None = None,
    return_edit_moment: bool | None = None,
    rollback_on_failure: bool | None = None,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> DeleteFeaturesResult:
    base = trim_url(url)
    options = _edit_options(gdb_version, return_edit_moment, rollback_on_failure)
    options["objectIds"] = object_ids
    options["where"] = where
    data = send(
        f"{base}/deleteFeatures",
        "POST",
        merge_params({}, params, options),
        authentication,
        client=client,
        settings=settings,
    )
    return DeleteFeaturesResult.model_validate(data)


def apply_edits(
    *,
    url: str,
    adds: Sequence[FeatureInput] | None = None,
    updates: Sequence[FeatureInput] | None = None,
    deletes: Sequence[int] | None = None,
    gdb_version: str | None = None,
    return_edit_moment: bool | None = None,
    rollback_on_failure: bool | None = None,
    params: Mapping[str, Any] | None = None,
    authentication: Authentication | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> ApplyEditsResult:
    """Adds, updates and deletes in a single request."""
    if adds is None and updates is None and deletes is None and not params:
        raise InvalidArgumentError("apply_edits needs at least one of adds, updates or deletes")
    base = trim_url(url)
    options = _edit_options(gdb_version, return_edit_moment, rollback_on_failure)
    options.update(
        {
            "adds": list(adds) if adds is not None else None,
            "updates": list(updates) if updates is not None else None,
            "deletes": list(deletes) if deletes is not None else None,
        }
    )
    data = send(
        f"{base}/applyEdits",
        "POST",
        merge_params({}, params, options),
        authentication,
        client=client,
        settings=settings,
    )
    return ApplyEditsResult.model_validate(data)
