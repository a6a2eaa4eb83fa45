"""String helpers: naming conventions, validation and small lookups."""

from __future__ import annotations

import os
import re
import secrets
import stat
import time
from collections.abc import Iterable, Sequence

TEXT_ERR_NOT_UUID = "string is not a valid UUID"
TEXT_ERR_NOT_EMAIL = "string is not a valid email address"

_SEPARATORS = frozenset("_ -")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_UUID_DASHED_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_UUID_PLAIN_RE = re.compile(r"[0-9a-fA-F]{32}")


def generate_key() -> str:
    """Return a unique-ish key: hex nanosecond time, a dash and 16 random bytes in hex."""
    return f"{time.time_ns():x}-{secrets.token_hex(16)}"


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    start = 0
    end = 0
    for position, char in enumerate(s):
        index = s[start:position].find(char)
        if index == -1:
            end = max(end, position + 1)
        else:
            start += index + 1
            end += index + 1
    return end - start


def to_snake_case(s: str) -> str:
    """Convert ``s`` to snake_case, e.g. ``"SimpleXMLParser"`` -> ``"simple_xml_parser"``."""
    parts: list[str] = []
    for position, char in enumerate(s):
        if position > 0 and char.isupper():
            previous_lower = s[position - 1].islower()
            next_lower = position + 1 < len(s) and s[position + 1].islower()
            if previous_lower or next_lower:
                parts.append("_")
        parts.append(char.lower())
    return "".join(parts)


def to_camel_case(s: str) -> str:
    """Convert snake, kebab, spaced or PascalCase text to lower camelCase."""
    parts: list[str] = []
    next_upper = False
    first = True
    for char in s:
        if char in _SEPARATORS:
            next_upper = True
        elif first:
            parts.append(char.lower())
            first = False
        elif next_upper:
            parts.append(char.upper())
            next_upper = False
        else:
            parts.append(char if char.isupper() else char.lower())
    return "".join(parts)


def to_upper_first(s: str, sep: str, num: int) -> str:
    """Capitalise the first letter of the first ``num`` pieces of ``s`` split on ``sep``.

    ``num == -1`` capitalises every piece, ``num == 0`` returns ``s`` unchanged.
    Empty pieces are dropped. An empty ``sep`` splits into single characters.
    """
    if num == 0:
        return s
    if not s:
        pieces = [s]
    elif sep == "":
        pieces = list(s)
    else:
        pieces = s.split(sep)

    result: list[str] = []
    converted = 0
    for piece in pieces:
        if not piece:
            continue
        if num == -1 or (num > 0 and converted < num):
            result.append(piece[:1].upper() + piece[1:])
            converted += 1
        else:
            result.append(piece)
    return sep.join(result)


def is_format_string(s: str) -> bool:
    """Return True if ``s`` contains a ``%`` formatting directive marker."""
    return "%" in s


def is_upper(s: str) -> bool:
    """Return True if the first character of ``s`` is an upper-case letter."""
    return bool(s) and s[0].isupper()


def number_to_letters(n: int) -> str:
    """Convert a zero-based number to spreadsheet-style letters: 0 -> A, 26 -> AA."""
    letters: list[str] = []
    while n >= 0:
        letters.append(chr(ord("A") + n % 26))
        n = n // 26 - 1
    return "".join(reversed(letters))


def validate_uuid(value: str) -> str:
    """Return ``value`` if it is a UUID, otherwise raise ValueError.

    Accepted forms: canonical dashed, 32 hex digits, ``{...}`` braced and ``urn:uuid:`` prefixed.
    """
    candidate = value
    if len(candidate) == 45 and candidate[:9].lower() == "urn:uuid:":
        candidate = candidate[9:]
    elif len(candidate) == 38 and candidate.startswith("{") and candidate.endswith("}"):
        candidate = candidate[1:-1]
    if _UUID_DASHED_RE.fullmatch(candidate) or _UUID_PLAIN_RE.fullmatch(candidate):
        return value
    raise ValueError(TEXT_ERR_NOT_UUID)


def validate_email(email: str) -> str:
    """Return ``email`` if it looks like an e-mail address, otherwise raise ValueError."""
    if _EMAIL_RE.fullmatch(email) is None:
        raise ValueError(TEXT_ERR_NOT_EMAIL)
    return email


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` is a directory; raise OSError if it cannot be inspected."""
    return stat.S_ISDIR(os.stat(path).st_mode)


def file_suffix(filename: str) -> str:
    """Return the extension of the last path element including the dot, or ``""``."""
    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    last_sep = max(filename.rfind(sep) for sep in separators)
    dot = filename.rfind(".")
    return filename[dot:] if dot > last_sep else ""


def contains(items: Iterable[str], value: str) -> bool:
    """Return True if ``value`` is one of ``items``."""
    return any(item == value for item in items)


def find_index(items: Sequence[str], value: str) -> int:
    """Return the index of the first occurrence of ``value``, or -1."""
    return next((index for index, item in enumerate(items) if item == value), -1)