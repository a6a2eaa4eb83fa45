"""GeoJSON geometry, feature and feature collection containers."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from taurus.geo.point import Point


class Coordinate(Protocol):
    def to_json(self) -> str: ...

    def wkt(self) -> str: ...


C = TypeVar("C", bound=Coordinate)
P = TypeVar("P")


class GeometryType(str, Enum):
    """Geometry type names as used in GeoJSON and PostGIS."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    CIRCULAR_STRING = "CircularString"
    COMPOUND_CURVE = "CompoundCurve"
    CURVE_POLYGON = "CurvePolygon"
    MULTI_CURVE = "MultiCurve"
    MULTI_SURFACE = "MultiSurface"

    def __str__(self) -> str:
        return self.value


@dataclass
class Geometry(Generic[C]):
    """A geometry: its type and its coordinates."""

    type: GeometryType
    coordinates: C

    def __str__(self) -> str:
        return str(self.coordinates)

    def to_dict(self) -> dict[str, Any]:
        """Return the geometry as a GeoJSON-shaped dictionary."""
        return {"type": GeometryType(self.type).value, "coordinates": json.loads(self.coordinates.to_json())}

    def to_json(self) -> str:
        """Return the geometry as compact GeoJSON text."""
        return f'{{"type":{json.dumps(GeometryType(self.type).value)},"coordinates":{self.coordinates.to_json()}}}'


def _plain_properties(properties: Any) -> Any:
    if dataclasses.is_dataclass(properties) and not isinstance(properties, type):
        return dataclasses.asdict(properties)
    return properties


@dataclass
class Feature(Generic[P, C]):
    """A GeoJSON feature: properties together with a geometry."""

    properties: P
    geometry: Geometry[C]
    type: str = field(default="Feature", init=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the feature as a GeoJSON-shaped dictionary."""
        return {
            "type": self.type,
            "properties": _plain_properties(self.properties),
            "geometry": self.geometry.to_dict(),
        }


@dataclass
class FeatureCollection(Generic[P, C]):
    """A GeoJSON collection of features."""

    features: list[Feature[P, C]] = field(default_factory=list)
    type: str = field(default="FeatureCollection", init=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the collection as a GeoJSON-shaped dictionary."""
        return {"type": self.type, "features": [feature.to_dict() for feature in self.features]}


def new_geometry_by_point(lng: float, lat: float) -> Geometry[Point]:
    """Create a point geometry from longitude and latitude."""
    return Geometry(GeometryType.POINT, Point(lng, lat))