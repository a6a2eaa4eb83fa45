"""Random string generation."""

from __future__ import annotations

import random

_rng = random.Random()


def string_with_charset(length: int, charset: str) -> str:
    """Return a random string of ``length`` characters drawn from ``charset``."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not charset:
        raise ValueError("charset must not be empty")
    return "".join(_rng.choice(charset) for _ in range(length))