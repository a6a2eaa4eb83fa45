"""A point given by longitude and latitude."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from decimal import Decimal

from taurus.geo.errors import GeoJSONDecodeError, GeometryCreateError, UnsupportedScanError

_POINT_PREFIX = "POINT"
_TYPE_NAME = "Point"


def _format_g(value: float) -> str:
    """Format a float with the shortest digits, switching to exponent form like ``%g``."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"
    parts = Decimal(repr(abs(value))).as_tuple()
    raw = "".join(str(d) for d in parts.digits)
    digits = raw.rstrip("0")
    exponent = int(parts.exponent) + (len(raw) - len(digits))
    count = len(digits)
    point = count + exponent
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
        return f"{sign}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if point <= 0:
        body = "0." + "0" * -point + digits
    elif point >= count:
        body = digits + "0" * (point - count)
    else:
        body = digits[:point] + "." + digits[point:]
    return sign + body


def _parse_float(text: str) -> float:
    if not text or "_" in text or any(ch.isspace() for ch in text):
        raise ValueError(f"invalid number {text!r}")
    return float(text)


def _coordinates_json(src: str) -> str:
    """Extract the ``coordinates`` member of a GeoJSON geometry as compact JSON text."""
    document = json.loads(src)
    if not isinstance(document, dict):
        raise ValueError("GeoJSON geometry must be an object")
    if "type" in document and not isinstance(document["type"], str):
        raise ValueError("GeoJSON type must be a string")
    if "coordinates" not in document:
        raise ValueError("GeoJSON geometry has no coordinates")
    return json.dumps(document["coordinates"], separators=(",", ":"))


@dataclass(frozen=True)
class Point:
    """A point; longitude must lie in [-180, 180] and latitude in [-90, 90]."""

    lng: float
    lat: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "lng", float(self.lng))
        object.__setattr__(self, "lat", float(self.lat))
        if self.lng < -180 or self.lng > 180:
            raise GeometryCreateError(_TYPE_NAME, f"lng range [-180, 180], but got {_format_g(self.lng)}")
        if self.lat < -90 or self.lat > 90:
            raise GeometryCreateError(_TYPE_NAME, f"lat range [-90, 90], but got {_format_g(self.lat)}")

    def __str__(self) -> str:
        return self.wkt()

    def _coordinate_text(self) -> str:
        return f"{_format_g(self.lng)} {_format_g(self.lat)}"

    def wkt(self) -> str:
        """Return the point as WKT, e.g. ``POINT(1 2)``."""
        return f"{_POINT_PREFIX}({self._coordinate_text()})"

    def to_json(self) -> str:
        """Return the coordinates as a JSON array ``[lng,lat]``."""
        return f"[{_format_g(self.lng)},{_format_g(self.lat)}]"

    @classmethod
    def from_json(cls, data: str | bytes) -> Point:
        """Parse a ``[lng,lat]`` JSON array."""
        if isinstance(data, bytes):
            data = data.decode()
        coords = data.strip("[]").split(",")
        if len(coords) != 2:
            raise GeometryCreateError(
                _TYPE_NAME, f"UnmarshalJSON() coordinate length is 2, but got {len(coords)}"
            )
        try:
            lng = _parse_float(coords[0])
        except ValueError:
            raise GeometryCreateError(_TYPE_NAME, f"UnmarshalJSON() lng is float, but got {coords[0]}") from None
        try:
            lat = _parse_float(coords[1])
        except ValueError:
            raise GeometryCreateError(_TYPE_NAME, f"UnmarshalJSON() lat is float, but got {coords[1]}") from None
        return cls(lng, lat)

    @classmethod
    def from_wkt(cls, src: str) -> Point:
        """Parse ``POINT(lng lat)`` or a bare ``lng lat`` pair."""
        trimmed = src.removeprefix(_POINT_PREFIX).strip(" ")
        trimmed = trimmed.removeprefix("(").removesuffix(")")
        coords = trimmed.split(" ")
        if len(coords) != 2:
            raise GeometryCreateError(_TYPE_NAME, f"Decode() coordinate length is 2, but got {len(coords)}")
        try:
            lng = _parse_float(coords[0])
        except ValueError:
            raise GeometryCreateError(_TYPE_NAME, f"Decode() lng is float, but got {coords[0]}") from None
        try:
            lat = _parse_float(coords[1])
        except ValueError:
            raise GeometryCreateError(_TYPE_NAME, f"Decode() lat is float, but got {coords[1]}") from None
        return cls(lng, lat)

    def geojson(self) -> str:
        """Return a complete GeoJSON geometry object for the point."""
        return f'{{"type":"{_TYPE_NAME}","coordinates":{self.to_json()}}}'

    @classmethod
    def from_geojson(cls, src: str) -> Point:
        """Read a point from a GeoJSON geometry object."""
        try:
            return cls.from_json(_coordinates_json(src))
        except (ValueError, TypeError) as exc:
            raise GeoJSONDecodeError(_TYPE_NAME, exc) from exc

    @classmethod
    def decode(cls, src: str, geom_type: str) -> Point:
        """Decode database text produced by ``ST_AsText`` or ``ST_AsGeoJSON``."""
        if geom_type == "ST_AsText":
            return cls.from_wkt(src)
        if geom_type == "ST_AsGeoJSON":
            return cls.from_geojson(src)
        raise UnsupportedScanError(geom_type, _TYPE_NAME)