"""Pieces shared by the network analysis operations."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

from geoservices import AuthenticationRequiredError, TransportError
from geoservices.auth import Authentication, default_authentication
from geoservices.settings import GeoservicesSettings
from geoservices.shaping import shape_response

_COMPRESSED_TOKEN = re.compile(r"[+-][^+\-|]+")

HOSTED_DOMAIN = ".arcgis.com"


def is_hosted_endpoint(endpoint: str) -> bool:
    host = urlparse(endpoint).hostname or ""
    return host.endswith(HOSTED_DOMAIN)


def resolve_authentication(
    authentication: Authentication | None, settings: GeoservicesSettings
) -> Authentication | None:
    """Fall back to the configured API key when the caller passes none."""
    if authentication is not None:
        return authentication
    return default_authentication(settings)


def require_authentication(endpoint: str, authentication: Authentication | None, message: str) -> None:
    """The hosted World services reject anonymous solves; fail before sending."""
    if authentication is None and is_hosted_endpoint(endpoint):
        raise AuthenticationRequiredError(message)


def travel_direction_param(direction: str | None) -> str | None:
    if direction is None:
        return None
    if direction == "incidentsToFacilities":
        return "esriNATravelDirectionFromFacility"
    return "esriNATravelDirectionToFacility"


def _read_section(section: str) -> list[int]:
    tokens = _COMPRESSED_TOKEN.findall(section)
    if "".join(tokens) != section:
        raise ValueError(f"Malformed compressed geometry section: {section!r}")
    return [int(token, 32) for token in tokens]


def _read_ordinates(section: str, count: int) -> list[float]:
    values = _read_section(section)
    if len(values) != count + 1 or values[0] <= 0:
        raise ValueError(f"Malformed compressed geometry section: {section!r}")
    factor, current, ordinates = values[0], 0, []
    for delta in values[1:]:
        current += delta
        ordinates.append(current / factor)
    return ordinates


def decompress_geometry(compressed: str) -> dict[str, Any]:
    """Decode an Esri compressed geometry string into a polyline.

    The first base-32 token is the coefficient; the rest are cumulative
    x/y deltas. Strings opening with a ``+0+1`` header carry a flags token
    next, and then ``|``-separated z (flag 1) and m (flag 2) sections after
    the x/y section.
    """
    sections = [section for section in compressed.split("|") if section]
    if not sections:
        raise ValueError(f"Malformed compressed geometry: {compressed!r}")
    values = _read_section(sections.pop(0))
    flags = 0
    if values and values[0] == 0:
        if len(values) < 3:
            raise ValueError(f"Malformed compressed geometry: {compressed!r}")
        flags = values[2]
        values = values[3:]
        if not values and sections:
            values = _read_section(sections.pop(0))
    if not values or len(values) % 2 == 0 or values[0] <= 0:
        raise ValueError(f"Malformed compressed geometry: {compressed!r}")
    coefficient = values[0]
    x = y = 0
    points: list[list[float]] = []
    for x_delta, y_delta in zip(values[1::2], values[2::2]):
        x += x_delta
        y += y_delta
        points.append([x / coefficient, y / coefficient])

    geometry: dict[str, Any] = {}
    for flag, key in ((1, "hasZ"), (2, "hasM")):
        if not flags & flag:
            continue
        if not sections:
            raise ValueError(f"Missing compressed geometry section for {key}: {compressed!r}")
        for point, ordinate in zip(points, _read_ordinates(sections.pop(0), len(points))):
            point.append(ordinate)
        geometry[key] = True
    geometry["paths"] = [points]
    return geometry


def _decode_directions(directions: list[Mapping[str, Any]]) -> list[dict[str, Any]]:
    decoded = []
    for entry in directions:
        features = []
        for feature in entry.get("features") or []:
            feature = dict(feature)
            compressed = feature.get("compressedGeometry")
            if compressed:
                try:
                    feature["geometry"] = decompress_geometry(compressed)
                except ValueError as exc:
                    raise TransportError(
                        "BAD_RESPONSE", str(exc), {"compressedGeometry": compressed}
                    ) from exc
            features.append(feature)
        decoded.append({**entry, "features": features})
    return decoded


def shape_solve_response(raw: Mapping[str, Any], display_keys: tuple[str, ...]) -> dict[str, Any]:
    shaped = shape_response(raw, display_keys)
    if shaped.get("directions"):
        shaped["directions"] = _decode_directions(shaped["directions"])
    return shaped
