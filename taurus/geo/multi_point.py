"""A collection of points."""

from __future__ import annotations

from dataclasses import dataclass

from taurus.geo.errors import GeoJSONDecodeError, UnsupportedScanError
from taurus.geo.point import Point, _coordinates_json

_MULTI_POINT_PREFIX = "MULTIPOINT"
_TYPE_NAME = "MultiPoint"


@dataclass(frozen=True)
class MultiPoint:
    """Any number of points."""

    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def __str__(self) -> str:
        return self.wkt()

    def wkt(self) -> str:
        """Return the points as WKT, e.g. ``MULTIPOINT(1 2,3 4)``."""
        body = ",".join(point._coordinate_text() for point in self.points)
        return f"{_MULTI_POINT_PREFIX}({body})"

    def to_json(self) -> str:
        """Return the coordinates as a JSON array of ``[lng,lat]`` pairs."""
        return "[" + ",".join(point.to_json() for point in self.points) + "]"

    @classmethod
    def from_json(cls, data: str | bytes) -> MultiPoint:
        """Parse a JSON array of ``[lng,lat]`` pairs."""
        if isinstance(data, bytes):
            data = data.decode()
        pieces = data.strip("[]").split("],[")
        return cls(tuple(Point.from_json(piece) for piece in pieces))

    @classmethod
    def from_wkt(cls, src: str) -> MultiPoint:
        """Parse ``MULTIPOINT(lng lat,...)`` text; parenthesised points are accepted too."""
        trimmed = src.removeprefix(_MULTI_POINT_PREFIX).strip(" ")
        trimmed = trimmed.removeprefix("(").removesuffix(")")
        return cls(tuple(Point.from_wkt(piece) for piece in trimmed.split(",")))

    def geojson(self) -> str:
        """Return a complete GeoJSON geometry object for the points."""
        return f'{{"type":"{_TYPE_NAME}","coordinates":{self.to_json()}}}'

    @classmethod
    def from_geojson(cls, src: str) -> MultiPoint:
        """Read points from a GeoJSON geometry object."""
        try:
            return cls.from_json(_coordinates_json(src))
        except (ValueError, TypeError) as exc:
            raise GeoJSONDecodeError(_TYPE_NAME, exc) from exc

    @classmethod
    def decode(cls, src: str, geom_type: str) -> MultiPoint:
        """Decode database text produced by ``ST_AsText`` or ``ST_AsGeoJSON``."""
        if geom_type == "ST_AsText":
            return cls.from_wkt(src)
        if geom_type == "ST_AsGeoJSON":
            return cls.from_geojson(src)
        raise UnsupportedScanError(geom_type, _TYPE_NAME)