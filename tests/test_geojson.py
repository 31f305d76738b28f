import copy

import pytest

from geoservices.geojson import arcgis_to_geojson, feature_set_to_geojson, ring_is_clockwise
from geoservices.shaping import shape_feature_set, shape_response, should_derive_geojson, spatial_reference_id

CLOCKWISE_SQUARE = [[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]]
COUNTER_CLOCKWISE_HOLE = [[2, 2], [8, 2], [8, 8], [2, 8], [2, 2]]


@pytest.mark.parametrize("wkid, expected", [(4326, True), (102100, False), (3857, False), (None, False)])
def test_should_derive_geojson(wkid, expected):
    assert should_derive_geojson(wkid) is expected


def test_spatial_reference_id_falls_back_to_latest_wkid():
    assert spatial_reference_id({"spatialReference": {"wkid": 4326}}) == 4326
    assert spatial_reference_id({"spatialReference": {"latestWkid": 4326}}) == 4326
    assert spatial_reference_id({"features": []}) is None


def test_point_and_multipoint():
    assert arcgis_to_geojson({"x": 1, "y": 2}) == {"type": "Point", "coordinates": [1, 2]}
    assert arcgis_to_geojson({"x": 1, "y": 2, "z": 3}) == {"type": "Point", "coordinates": [1, 2, 3]}
    assert arcgis_to_geojson({"points": [[1, 2], [3, 4]]}) == {"type": "MultiPoint", "coordinates": [[1, 2], [3, 4]]}


def test_polylines():
    assert arcgis_to_geojson({"paths": [[[1, 2], [3, 4]]]}) == {"type": "LineString", "coordinates": [[1, 2], [3, 4]]}
    assert arcgis_to_geojson({"paths": [[[1, 2], [3, 4]], [[5, 6], [7, 8]]]})["type"] == "MultiLineString"


def test_polygon_with_hole():
    assert ring_is_clockwise(CLOCKWISE_SQUARE)
    assert not ring_is_clockwise(COUNTER_CLOCKWISE_HOLE)
    geometry = arcgis_to_geojson({"rings": [CLOCKWISE_SQUARE, COUNTER_CLOCKWISE_HOLE]})
    assert geometry["type"] == "Polygon"
    outer, hole = geometry["coordinates"]
    assert outer == CLOCKWISE_SQUARE[::-1]
    assert hole == COUNTER_CLOCKWISE_HOLE[::-1]


def test_two_exteriors_make_multipolygon():
    other = [[20, 20], [20, 30], [30, 30], [30, 20], [20, 20]]
    geometry = arcgis_to_geojson({"rings": [CLOCKWISE_SQUARE, other]})
    assert geometry["type"] == "MultiPolygon"
    assert len(geometry["coordinates"]) == 2


def test_open_ring_is_closed():
    geometry = arcgis_to_geojson({"rings": [CLOCKWISE_SQUARE[:-1]]})
    ring = geometry["coordinates"][0]
    assert ring[0] == ring[-1]
    assert len(ring) == 5


def test_orphan_hole_becomes_exterior():
    geometry = arcgis_to_geojson({"rings": [COUNTER_CLOCKWISE_HOLE]})
    assert geometry == {"type": "Polygon", "coordinates": [COUNTER_CLOCKWISE_HOLE]}


def test_envelope_and_empty():
    envelope = arcgis_to_geojson({"xmin": 0, "ymin": 0, "xmax": 1, "ymax": 1})
    assert envelope["type"] == "Polygon"
    assert envelope["coordinates"][0][0] == envelope["coordinates"][0][-1]
    assert arcgis_to_geojson(None) is None
    assert arcgis_to_geojson({}) is None


def test_feature_set_to_geojson_copies_attributes():
    feature_set = {
        "features": [
            {"attributes": {"OBJECTID": 7, "Name": "a"}, "geometry": {"x": 1, "y": 2}},
            {"attributes": {"Name": "b"}},
        ]
    }
    collection = feature_set_to_geojson(feature_set)
    assert collection["type"] == "FeatureCollection"
    first, second = collection["features"]
    assert first == {
        "type": "Feature",
        "id": 7,
        "geometry": {"type": "Point", "coordinates": [1, 2]},
        "properties": {"OBJECTID": 7, "Name": "a"},
    }
    assert second["geometry"] is None
    assert "id" not in second


def test_shape_feature_set_gates_on_spatial_reference():
    geographic = {"spatialReference": {"wkid": 4326}, "fieldAliases": {"a": "A"}, "features": [{"geometry": {"x": 1, "y": 2}}]}
    projected = {**geographic, "spatialReference": {"wkid": 102100}}
    assert "geoJson" in shape_feature_set(geographic, derive_geojson=True)
    assert "geoJson" not in shape_feature_set(geographic, derive_geojson=False)
    assert "geoJson" not in shape_feature_set(projected, derive_geojson=True)
    assert "fieldAliases" not in shape_feature_set(projected)


def test_shape_response_leaves_raw_untouched():
    raw = {
        "saPolygons": {"spatialReference": {"wkid": 4326}, "fieldAliases": {}, "features": []},
        "messages": [],
    }
    snapshot = copy.deepcopy(raw)
    shaped = shape_response(raw, ("saPolygons",))
    assert raw == snapshot
    assert shaped["saPolygons"]["geoJson"] == {"type": "FeatureCollection", "features": []}
    assert "fieldAliases" not in shaped["saPolygons"]
    assert shaped["messages"] == []


def test_shape_response_strips_aliases_from_feature_set_lists():
    raw = {
        "directions": [{"routeId": 1, "fieldAliases": {"text": "Text"}, "features": []}],
        "messages": [{"type": 0, "description": "ok"}],
    }
    shaped = shape_response(raw)
    assert shaped["directions"] == [{"routeId": 1, "features": []}]
    assert shaped["messages"] == raw["messages"]
    assert "fieldAliases" in raw["directions"][0]
