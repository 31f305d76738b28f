"""Esri JSON to GeoJSON conversion.

Coordinates are copied as-is; nothing is reprojected. Polygon rings follow
the Esri convention: clockwise rings are exteriors, counter-clockwise rings
are holes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

Ring = list[list[float]]

_ID_ATTRIBUTES = ("OBJECTID", "FID")


def close_ring(ring: Ring) -> Ring:
    if len(ring) >= 2 and (ring[0][0] != ring[-1][0] or ring[0][1] != ring[-1][1]):
        return ring + [ring[0]]
    return list(ring)


def ring_is_clockwise(ring: Ring) -> bool:
    total = 0.0
    for (x1, y1, *_), (x2, y2, *_) in zip(ring, ring[1:]):
        total += (x2 - x1) * (y2 + y1)
    return total >= 0


def _point_in_ring(point: list[float], ring: Ring) -> bool:
    x, y = point[0], point[1]
    inside = False
    for (x1, y1, *_), (x2, y2, *_) in zip(ring, ring[1:]):
        if (y1 > y) != (y2 > y) and x < (x2 - x1) * (y - y1) / (y2 - y1) + x1:
            inside = not inside
    return inside


def _rings_to_geojson(rings: list[Ring]) -> dict[str, Any] | None:
    outer_rings: list[list[Ring]] = []
    holes: list[Ring] = []

    for raw in rings:
        ring = close_ring(raw)
        if len(ring) < 4:
            continue
        # GeoJSON wants exteriors counter-clockwise, so every ring is reversed.
        if ring_is_clockwise(ring):
            outer_rings.append([ring[::-1]])
        else:
            holes.append(ring[::-1])

    orphans: list[Ring] = []
    for hole in holes:
        for polygon in outer_rings:
            if _point_in_ring(hole[0], polygon[0]):
                polygon.append(hole)
                break
        else:
            orphans.append(hole)

    for orphan in orphans:
        outer_rings.append([orphan[::-1]])

    if not outer_rings:
        return None
    if len(outer_rings) == 1:
        return {"type": "Polygon", "coordinates": outer_rings[0]}
    return {"type": "MultiPolygon", "coordinates": outer_rings}


def arcgis_to_geojson(geometry: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if not geometry:
        return None

    if "x" in geometry and "y" in geometry:
        if geometry["x"] is None or geometry["y"] is None:
            return None
        coordinates = [geometry["x"], geometry["y"]]
        if geometry.get("z") is not None:
            coordinates.append(geometry["z"])
        return {"type": "Point", "coordinates": coordinates}

    if geometry.get("points"):
        return {"type": "MultiPoint", "coordinates": [list(p) for p in geometry["points"]]}

    if geometry.get("paths"):
        paths = [[list(p) for p in path] for path in geometry["paths"]]
        if len(paths) == 1:
            return {"type": "LineString", "coordinates": paths[0]}
        return {"type": "MultiLineString", "coordinates": paths}

    if geometry.get("rings"):
        return _rings_to_geojson([[list(p) for p in ring] for ring in geometry["rings"]])

    if all(geometry.get(key) is not None for key in ("xmin", "ymin", "xmax", "ymax")):
        xmin, ymin, xmax, ymax = (geometry[key] for key in ("xmin", "ymin", "xmax", "ymax"))
        return {
            "type": "Polygon",
            "coordinates": [[[xmax, ymax], [xmin, ymax], [xmin, ymin], [xmax, ymin], [xmax, ymax]]],
        }

    return None


def _feature_id(attributes: Mapping[str, Any]) -> Any:
    for key in _ID_ATTRIBUTES:
        if key in attributes:
            return attributes[key]
    return None


def feature_to_geojson(feature: Mapping[str, Any]) -> dict[str, Any]:
    attributes = feature.get("attributes") or {}
    result: dict[str, Any] = {
        "type": "Feature",
        "geometry": arcgis_to_geojson(feature.get("geometry")),
        "properties": dict(attributes),
    }
    feature_id = _feature_id(attributes)
    if feature_id is not None:
        result["id"] = feature_id
    return result


def feature_set_to_geojson(feature_set: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [feature_to_geojson(f) for f in feature_set.get("features") or []],
    }
