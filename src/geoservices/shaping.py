"""Response shaping shared by all operations.

``fieldAliases`` never reaches callers. A ``geoJson`` view is attached to
display outputs only when their coordinates are already geographic.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .geojson import feature_set_to_geojson

GEOGRAPHIC_WKID = 4326


def is_feature_set(value: Any) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("features"), list)


def strip_field_aliases(feature_set: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in feature_set.items() if key != "fieldAliases"}


def spatial_reference_id(feature_set: Mapping[str, Any]) -> int | None:
    spatial_reference = feature_set.get("spatialReference")
    if not isinstance(spatial_reference, Mapping):
        return None
    wkid = spatial_reference.get("wkid")
    if wkid is None:
        wkid = spatial_reference.get("latestWkid")
    return wkid


def should_derive_geojson(wkid: int | None) -> bool:
    return wkid == GEOGRAPHIC_WKID


def shape_feature_set(feature_set: Mapping[str, Any], *, derive_geojson: bool = False) -> dict[str, Any]:
    shaped = strip_field_aliases(feature_set)
    shaped.pop("geoJson", None)
    if derive_geojson and should_derive_geojson(spatial_reference_id(feature_set)):
        shaped["geoJson"] = feature_set_to_geojson(feature_set)
    return shaped


def shape_response(raw: Mapping[str, Any], display_keys: Iterable[str] = ()) -> dict[str, Any]:
    """Return a shaped copy of ``raw``; ``raw`` itself is left untouched.

    The response may be a feature set itself or carry feature sets as
    top-level values (``saPolygons``, ``routes`` ...) or in top-level lists
    (``directions``).
    """
    if is_feature_set(raw):
        return shape_feature_set(raw)
    display = set(display_keys)
    shaped: dict[str, Any] = {}
    for key, value in raw.items():
        if is_feature_set(value):
            shaped[key] = shape_feature_set(value, derive_geojson=key in display)
        elif isinstance(value, list) and value and all(is_feature_set(item) for item in value):
            shaped[key] = [strip_field_aliases(item) for item in value]
        else:
            shaped[key] = value
    return shaped
