"""Helper functions made available to code generation templates."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Any, Callable

from taurus.stringutil import to_camel_case, to_snake_case

ACRONYMS: set[str] = set()


def make_dict(*args: Any) -> dict[str, Any]:
    """Build a dictionary from alternating keys and values."""
    if len(args) % 2:
        raise ValueError("invalid dict call")
    keys, values = args[::2], args[1::2]
    if not all(isinstance(key, str) for key in keys):
        raise TypeError("dict keys must be strings")
    return dict(zip(keys, values))


def to_lower(s: str) -> str:
    """Lower-case ``s`` unless it is a known acronym."""
    return s if s in ACRONYMS else s.lower()


def to_first_cap(s: str) -> str:
    """Upper-case the first character of ``s``."""
    return s[:1].upper() + s[1:]


def to_first_lower(s: str) -> str:
    """Lower-case the first character of ``s``."""
    return s[:1].lower() + s[1:]


def sub(a: int, b: int) -> int:
    """Return ``a - b``."""
    return a - b


def string_join(*args: str) -> str:
    """Concatenate all arguments."""
    return "".join(args)


def byte_to_string(b: int) -> str:
    """Return the character with code ``b`` (0-255)."""
    if not 0 <= b <= 255:
        raise ValueError("byte value out of range")
    return chr(b)


def splice(s: str, start: int, length: int) -> str:
    """Return ``length`` characters of ``s`` from ``start``.

    A negative ``start`` counts from the end; a negative ``length`` stops that many
    characters before the end. A ``start`` past the end returns ``s`` unchanged.
    """
    size = len(s)
    if start < 0:
        start += size
    if start >= size:
        return s
    if start < 0:
        raise IndexError("start out of range")
    if length < 0:
        length = size - start + length
    if start + length > size:
        length = size - start
    if length < 0:
        raise IndexError("length out of range")
    return s[start:start + length]


def last(items: Sequence[str]) -> str:
    """Return the last item, or ``""`` when there is none."""
    return items[-1] if items else ""


def trim_slash(s: str) -> str:
    """Strip leading and trailing slashes."""
    return s.strip("/")


def _path_base(path: str) -> str:
    separators = "/" + os.sep + (os.altsep or "")
    if not path:
        return "."
    stripped = path.rstrip(separators)
    if not stripped:
        return os.sep
    for separator in set(separators):
        stripped = stripped.rsplit(separator, 1)[-1]
    return stripped


def _split(s: str, sep: str) -> list[str]:
    return list(s) if sep == "" else s.split(sep)


FUNCS: dict[str, Callable[..., Any]] = {
    "filePathBase": _path_base,
    "createMap": make_dict,
    "stringToLower": to_lower,
    "stringToFirstCap": to_first_cap,
    "stringToFirstLower": to_first_lower,
    "stringToSnakeCase": to_snake_case,
    "stringToCamelCase": to_camel_case,
    "stringReplace": lambda s, old, new, n: s.replace(old, new, n),
    "stringHasPrefix": lambda s, prefix: s.startswith(prefix),
    "stringReplaceAll": lambda s, old, new: s.replace(old, new),
    "stringSub": sub,
    "stringJoin": string_join,
    "stringIndex": lambda s, part: s.find(part),
    "stringSplice": splice,
    "stringContains": lambda s, part: part in s,
    "stringSplit": _split,
    "toString": byte_to_string,
    "stringGetSpilceLast": last,
    "stringTrimPrefix": lambda s, prefix: s.removeprefix(prefix),
    "stringCount": lambda s, part: s.count(part),
    "stringTrimSlash": trim_slash,
}