"""Errors raised while building, encoding and decoding geometries."""

from __future__ import annotations

import json
from typing import Any


def _quote(value: Any) -> str:
    """Render ``value`` as a double-quoted string."""
    return json.dumps(str(getattr(value, "value", value)))


def _plain(value: Any) -> str:
    return str(getattr(value, "value", value))


class GeoError(ValueError):
    """Base class of all geometry errors; ``code`` identifies the kind of failure."""

    code = "020002000x"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ScanTypeError(GeoError):
    """A value read from the database was not text."""

    code = "0200020001"

    def __init__(self) -> None:
        super().__init__("Scan() data type is not string.")


class UnsupportedScanError(GeoError):
    """A stored value cannot be decoded into the requested geometry."""

    code = "0200020002"

    def __init__(self, stored: Any, target: Any) -> None:
        self.stored = _plain(stored)
        self.target = _plain(target)
        super().__init__(f'unsupported Scan, storing type "{self.stored}" into type {self.target}')


class ScanStoreError(GeoError):
    """Decoding a stored value into a geometry failed."""

    code = "0200020003"

    def __init__(self, stored: Any, target: Any, error: Any) -> None:
        self.stored = _plain(stored)
        self.target = _plain(target)
        self.error = error
        super().__init__(f'storing type {self.stored} into type "{self.target}", error: {error}')


class UnsupportedGeomTypeError(GeoError):
    """The geometry storage format is not known."""

    code = "0200020004"

    def __init__(self, geom_type: Any) -> None:
        self.geom_type = _plain(geom_type)
        super().__init__(f"unsupported GeomType type: {_quote(geom_type)}")


class GeometryCreateError(GeoError):
    """A geometry could not be created from the given values."""

    code = "0200020201"

    def __init__(self, geometry_type: Any, reason: Any) -> None:
        self.geometry_type = _plain(geometry_type)
        self.reason = reason
        super().__init__(f"create geometry type {_quote(geometry_type)} error: {reason}")


class GeoJSONDecodeError(GeoError):
    """A geometry could not be read from GeoJSON."""

    code = "0200020202"

    def __init__(self, geometry_type: Any, reason: Any) -> None:
        self.geometry_type = _plain(geometry_type)
        self.reason = reason
        super().__init__(f"create {_quote(geometry_type)} from GeoJSON error: {reason}")


class UnsupportedGeoJSONTypeError(GeoError):
    """The GeoJSON geometry type is not supported."""

    code = "0200020203"

    def __init__(self, geometry_type: Any) -> None:
        self.geometry_type = _plain(geometry_type)
        super().__init__(f"unsupported GeoJSON geometry type: {_quote(geometry_type)}")