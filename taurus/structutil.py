"""Record introspection helpers."""

from __future__ import annotations

import dataclasses
from typing import Any


def get_fields(value: Any) -> list[str] | None:
    """Return the field names of a dataclass or named tuple, class or instance.

    Returns None for anything that is not such a record.
    """
    if dataclasses.is_dataclass(value):
        return [field.name for field in dataclasses.fields(value)]
    record_type = value if isinstance(value, type) else type(value)
    if issubclass(record_type, tuple) and hasattr(record_type, "_fields"):
        return list(record_type._fields)
    return None