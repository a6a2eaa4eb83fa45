from dataclasses import dataclass

import pytest

from taurus.geo.errors import GeometryCreateError
from taurus.geo.geometry import (
    Feature,
    FeatureCollection,
    Geometry,
    GeometryType,
    new_geometry_by_point,
)
from taurus.geo.point import Point
from taurus.geo.polygon import Polygon


@dataclass
class FeatureProps:
    name: str


def test_new_feature_collection():
    point = Point(120.5, 30.25)
    feature = Feature(FeatureProps(name="demo"), Geometry(GeometryType.POINT, point))
    collection = FeatureCollection([feature])

    assert collection.type == "FeatureCollection"
    assert len(collection.features) == 1
    assert collection.features[0].properties.name == "demo"
    assert collection.features[0].geometry.type == GeometryType.POINT
    assert collection.features[0].type == "Feature"


def test_collection_to_dict():
    point = Point(120.5, 30.25)
    feature = Feature(FeatureProps(name="demo"), Geometry(GeometryType.POINT, point))
    assert FeatureCollection([feature]).to_dict() == {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"name": "demo"},
                "geometry": {"type": "Point", "coordinates": [120.5, 30.25]},
            }
        ],
    }


def test_geometry_json_matches_point_geojson():
    point = Point(120.5, 30.25)
    geometry = Geometry(GeometryType.POINT, point)
    assert geometry.to_json() == point.geojson()
    assert str(geometry) == point.wkt()


def test_polygon_geometry_to_dict():
    polygon = Polygon.from_coordinates([[1, 2], [3, 4], [5, 6], [1, 2]])
    geometry = Geometry(GeometryType.POLYGON, polygon)
    assert geometry.to_dict() == {"type": "Polygon", "coordinates": [[[1, 2], [3, 4], [5, 6], [1, 2]]]}
    assert geometry.to_json() == polygon.geojson()


def test_new_geometry_by_point():
    geometry = new_geometry_by_point(60, 60)
    assert geometry.type == GeometryType.POINT
    assert geometry.coordinates == Point(60, 60)


def test_new_geometry_by_point_rejects_invalid():
    with pytest.raises(GeometryCreateError):
        new_geometry_by_point(200, 0)


def test_geometry_type_text():
    assert str(GeometryType.MULTI_POLYGON) == "MultiPolygon"
    assert GeometryType("Polygon") is GeometryType.POLYGON


def test_feature_with_plain_properties():
    feature = Feature({"id": 1}, new_geometry_by_point(1, 2))
    assert feature.to_dict()["properties"] == {"id": 1}
    assert feature.to_dict()["geometry"]["coordinates"] == [1, 2]