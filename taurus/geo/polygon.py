"""A closed polygon made of points."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from taurus.geo.errors import GeoJSONDecodeError, GeometryCreateError, UnsupportedScanError
from taurus.geo.point import Point, _coordinates_json

_POLYGON_PREFIX = "POLYGON"
_TYPE_NAME = "Polygon"


@dataclass(frozen=True)
class Polygon:
    """A ring of at least four points whose first and last points coincide."""

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        object.__setattr__(self, "points", points)
        if len(points) < 4:
            raise GeometryCreateError(_TYPE_NAME, "The number of points is less than 4")
        first, last = points[0], points[-1]
        if first.lat != last.lat or first.lng != last.lng:
            raise GeometryCreateError(_TYPE_NAME, "The first point and the last point are not the same")

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Sequence[float]]) -> Polygon:
        """Build a polygon from ``[lng, lat]`` pairs."""
        points = []
        for pair in coordinates:
            if len(pair) < 2:
                raise GeometryCreateError(_TYPE_NAME, "a coordinate needs longitude and latitude")
            points.append(Point(pair[0], pair[1]))
        return cls(tuple(points))

    def __str__(self) -> str:
        return self.wkt()

    def wkt(self) -> str:
        """Return the polygon as WKT, e.g. ``POLYGON((0 0,1 0,1 1,0 0))``."""
        body = ",".join(point._coordinate_text() for point in self.points)
        return f"{_POLYGON_PREFIX}(({body}))"

    def to_json(self) -> str:
        """Return the coordinates as a JSON array of rings."""
        return "[[" + ",".join(point.to_json() for point in self.points) + "]]"

    @classmethod
    def from_json(cls, data: str | bytes) -> Polygon:
        """Parse the JSON coordinate array of a single-ring polygon."""
        if isinstance(data, bytes):
            data = data.decode()
        pieces = data.strip("[]").split("],[")
        return cls(tuple(Point.from_json(piece) for piece in pieces))

    @classmethod
    def from_wkt(cls, src: str) -> Polygon:
        """Parse ``POLYGON((lng lat,...))`` text."""
        trimmed = src.removeprefix(_POLYGON_PREFIX).strip(" ")
        trimmed = trimmed.removeprefix("((").removesuffix("))")
        return cls(tuple(Point.from_wkt(piece) for piece in trimmed.split(",")))

    def geojson(self) -> str:
        """Return a complete GeoJSON geometry object for the polygon."""
        return f'{{"type":"{_TYPE_NAME}","coordinates":{self.to_json()}}}'

    @classmethod
    def from_geojson(cls, src: str) -> Polygon:
        """Read a polygon from a GeoJSON geometry object."""
        try:
            return cls.from_json(_coordinates_json(src))
        except (ValueError, TypeError) as exc:
            raise GeoJSONDecodeError(_TYPE_NAME, exc) from exc

    @classmethod
    def decode(cls, src: str, geom_type: str) -> Polygon:
        """Decode database text produced by ``ST_AsText`` or ``ST_AsGeoJSON``."""
        if geom_type == "ST_AsText":
            return cls.from_wkt(src)
        if geom_type == "ST_AsGeoJSON":
            return cls.from_geojson(src)
        raise UnsupportedScanError(geom_type, _TYPE_NAME)