import json

import pytest

from taurus.geo.errors import GeoJSONDecodeError, GeometryCreateError, UnsupportedScanError
from taurus.geo.multi_point import MultiPoint
from taurus.geo.point import Point


@pytest.fixture
def multi_point():
    return MultiPoint((Point(1, 2), Point(3, 4)))


def test_wkt_format(multi_point):
    assert multi_point.wkt() == "MULTIPOINT(1 2,3 4)"
    assert str(multi_point) == multi_point.wkt()


def test_wkt_round_trip(multi_point):
    assert MultiPoint.from_wkt(multi_point.wkt()) == multi_point


def test_wkt_with_parenthesised_points(multi_point):
    assert MultiPoint.from_wkt("MULTIPOINT((1 2),(3 4))") == multi_point


def test_json_round_trip(multi_point):
    assert json.loads(multi_point.to_json()) == [[1, 2], [3, 4]]
    assert MultiPoint.from_json(multi_point.to_json()) == multi_point
    assert MultiPoint.from_json(multi_point.to_json().encode()) == multi_point


def test_geojson_round_trip(multi_point):
    document = json.loads(multi_point.geojson())
    assert document["type"] == "MultiPoint"
    assert document["coordinates"] == [[1, 2], [3, 4]]
    assert MultiPoint.from_geojson(multi_point.geojson()) == multi_point


def test_decode_both_formats(multi_point):
    assert MultiPoint.decode(multi_point.wkt(), "ST_AsText") == multi_point
    assert MultiPoint.decode(multi_point.geojson(), "ST_AsGeoJSON") == multi_point


def test_decode_unknown_format(multi_point):
    with pytest.raises(UnsupportedScanError):
        MultiPoint.decode(multi_point.wkt(), "ST_AsBinary")


def test_out_of_range_point_rejected():
    with pytest.raises(GeometryCreateError):
        MultiPoint.from_wkt("MULTIPOINT(200 0)")


def test_bad_json_rejected():
    with pytest.raises(GeometryCreateError):
        MultiPoint.from_json("[[1,2,3]]")


def test_bad_geojson_rejected():
    with pytest.raises(GeoJSONDecodeError):
        MultiPoint.from_geojson("not json")