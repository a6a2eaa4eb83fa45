"""A collection of polygons."""

from __future__ import annotations

from dataclasses import dataclass

from taurus.geo.errors import GeoJSONDecodeError, GeometryCreateError, UnsupportedScanError
from taurus.geo.point import _coordinates_json
from taurus.geo.polygon import _POLYGON_PREFIX, Polygon

_MULTI_POLYGON_PREFIX = "MULTIPOLYGON"
_TYPE_NAME = "MultiPolygon"


@dataclass(frozen=True)
class MultiPolygon:
    """One or more closed polygons."""

    polygons: tuple[Polygon, ...]

    def __post_init__(self) -> None:
        polygons = tuple(self.polygons)
        object.__setattr__(self, "polygons", polygons)
        if not polygons:
            raise GeometryCreateError(_TYPE_NAME, "The number of polygons is 0")

    def __str__(self) -> str:
        return self.wkt()

    def wkt(self) -> str:
        """Return the polygons as WKT, e.g. ``MULTIPOLYGON(((0 0,1 0,1 1,0 0)))``."""
        body = ",".join(polygon.wkt().removeprefix(_POLYGON_PREFIX) for polygon in self.polygons)
        return f"{_MULTI_POLYGON_PREFIX}({body})"

    def to_json(self) -> str:
        """Return the coordinates as a JSON array of polygons."""
        return "[" + ",".join(polygon.to_json() for polygon in self.polygons) + "]"

    @classmethod
    def from_json(cls, data: str | bytes) -> MultiPolygon:
        """Parse the JSON coordinate array of single-ring polygons."""
        if isinstance(data, bytes):
            data = data.decode()
        pieces = data.strip("[]").split("]],[[")
        return cls(tuple(Polygon.from_json(piece) for piece in pieces))

    @classmethod
    def from_wkt(cls, src: str) -> MultiPolygon:
        """Parse ``MULTIPOLYGON(((lng lat,...)),...)`` text."""
        trimmed = src.removeprefix(_MULTI_POLYGON_PREFIX).strip(" ")
        trimmed = trimmed.removeprefix("(").removesuffix(")")
        return cls(tuple(Polygon.from_wkt(piece) for piece in trimmed.split(")),((")))

    def geojson(self) -> str:
        """Return a complete GeoJSON geometry object for the polygons."""
        return f'{{"type":"{_TYPE_NAME}","coordinates":{self.to_json()}}}'

    @classmethod
    def from_geojson(cls, src: str) -> MultiPolygon:
        """Read polygons from a GeoJSON geometry object."""
        try:
            return cls.from_json(_coordinates_json(src))
        except (ValueError, TypeError) as exc:
            raise GeoJSONDecodeError(_TYPE_NAME, exc) from exc

    @classmethod
    def decode(cls, src: str, geom_type: str) -> MultiPolygon:
        """Decode database text produced by ``ST_AsText`` or ``ST_AsGeoJSON``."""
        if geom_type == "ST_AsText":
            return cls.from_wkt(src)
        if geom_type == "ST_AsGeoJSON":
            return cls.from_geojson(src)
        raise UnsupportedScanError(geom_type, _TYPE_NAME)