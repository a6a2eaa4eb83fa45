"""Mapping helpers."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    if isinstance(value, Mapping):
        entries = sorted(value.items(), key=lambda item: str(item[0]))
        return "map[" + " ".join(f"{_format_value(k)}:{_format_value(v)}" for k, v in entries) + "]"
    return str(value)


def values_to_strings(fields: Mapping[str, Any]) -> dict[str, str]:
    """Return a copy of ``fields`` with every value rendered as text.

    Booleans render as ``true``/``false``, None as ``<nil>`` and whole floats without a fraction.
    """
    return {key: _format_value(value) for key, value in fields.items()}