from __future__ import annotations

import re
from typing import Any, Iterable


# UUID versions 1-5 with the RFC 4122 variant nibble.
_CONVERSATION_ID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def normalize_identifier(value: Any) -> str | None:
    """Return the trimmed string, or None for anything that is not a non-blank str."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not trimmed:
        return None
    return trimmed


def unique_identifiers(values: Iterable[Any]) -> list[str]:
    """Normalize and de-duplicate identifiers case-insensitively, keeping first spelling."""
    seen: set[str] = set()
    unique: list[str] = []
    for value in values:
        normalized = normalize_identifier(value)
        if normalized is None:
            continue
        key = normalized.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(normalized)
    return unique


def identifiers_intersect(a: Iterable[str], b: Iterable[str]) -> bool:
    """True when the two identifier groups share a value, ignoring case.

    Empty groups never intersect.
    """
    keys = {value.lower() for value in a}
    if not keys:
        return False
    return any(value.lower() in keys for value in b)


def is_conversation_id(value: Any) -> bool:
    """Return True if `value` is a UUID (v1-v5) usable as a conversation handle."""
    if not isinstance(value, str):
        return False
    return _CONVERSATION_ID_RE.fullmatch(value) is not None
