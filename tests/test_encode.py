from datetime import datetime, timezone

import pytest

from feature_service.schemas import StatisticDefinition
from geoservices import InvalidArgumentError
from geoservices.encode import (
    build_query_string,
    encode_coordinate_pairs,
    encode_param,
    encode_params,
    format_number,
)


def test_format_number_keeps_full_precision():
    assert format_number(-118.3417932) == "-118.3417932"
    assert format_number(34.00451385) == "34.00451385"
    assert format_number(102100) == "102100"
    assert format_number(3.0) == "3"


def test_coordinate_pairs_use_comma_and_semicolon():
    pairs = [(-118.3417932, 34.00451385), (-118.08788, 34.01752)]
    assert encode_coordinate_pairs(pairs) == "-118.3417932,34.00451385;-118.08788,34.01752"
    assert encode_coordinate_pairs([]) == ""


def test_encode_param_scalars():
    assert encode_param(True) == "true"
    assert encode_param(False) == "false"
    assert encode_param("1=1") == "1=1"
    assert encode_param(5) == "5"


def test_encode_param_lists():
    assert encode_param(["FID", "Tree_ID", "Cmn_Name"]) == "FID,Tree_ID,Cmn_Name"
    assert encode_param([1001, 1002]) == "1001,1002"
    assert encode_param([]) == ""
    assert encode_param([{"attributes": {"a": 1}}]) == '[{"attributes":{"a":1}}]'


def test_encode_param_sets_are_sorted_and_delimited():
    assert encode_param({1003, 1001, 1002}) == "1001,1002,1003"
    assert encode_param(frozenset({"Cmn_Name", "FID"})) == "Cmn_Name,FID"
    assert encode_param(set()) == ""
    assert encode_param({"ids": {2, 1}}) == '{"ids":[1,2]}'


def test_encode_param_rejects_unencodable_values():
    with pytest.raises(InvalidArgumentError) as excinfo:
        encode_param({"geometry": object()})
    assert excinfo.value.code == "INVALID_ARGUMENT"
    assert excinfo.value.details == {"type": "dict"}


def test_encode_param_dates_are_epoch_millis():
    start = datetime(2008, 1, 1, tzinfo=timezone.utc)
    end = datetime(2009, 1, 1, tzinfo=timezone.utc)
    assert encode_param(start) == "1199145600000"
    assert encode_param([start, end]) == "1199145600000,1230768000000"


def test_encode_param_structures_are_compact_json():
    geometry = {"x": -117.1957, "y": 34.0564, "spatialReference": {"wkid": 4326}}
    assert encode_param(geometry) == '{"x":-117.1957,"y":34.0564,"spatialReference":{"wkid":4326}}'


def test_encode_param_statistic_models():
    stats = [StatisticDefinition(statistic_type="count", on_statistic_field="FID", out_statistic_field_name="n")]
    assert encode_param(stats) == (
        '[{"statisticType":"count","onStatisticField":"FID","outStatisticFieldName":"n"}]'
    )


def test_encode_param_rejects_none():
    with pytest.raises(TypeError):
        encode_param(None)


def test_encode_params_drops_none_and_keeps_order():
    assert encode_params({"b": 1, "a": None, "c": True}) == {"b": "1", "c": "true"}


def test_query_string_matches_uri_component_encoding():
    qs = build_query_string({"f": "json", "where": "Condition='Poor'", "outFields": "*"})
    assert qs == "f=json&where=Condition%3D'Poor'&outFields=*"
    assert build_query_string({"facilities": "-118.3,34.0;-118.0,34.1"}) == (
        "facilities=-118.3%2C34.0%3B-118.0%2C34.1"
    )


def test_encoding_is_deterministic():
    params = {"geometry": {"rings": [[[1, 2], [3, 4]]]}, "outFields": ["a", "b"]}
    assert build_query_string(encode_params(params)) == build_query_string(encode_params(params))
