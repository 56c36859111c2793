"""
Response shape extraction.

The inbox backend wraps protobuf values in a generic struct, so the literal
path to a conversation id or list varies by endpoint version and between list
and create responses. These helpers try each known shape in order and return
the first structural match.
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from homebit_inbox.conversations.types import ConversationRecord
from homebit_inbox.kernel.ids import normalize_identifier, unique_identifiers

logger = structlog.get_logger()

_ID_KEYS = ("id", "ID", "conversation_id")

# (profile keys, user keys) per side. Nested sub-objects are read separately.
_SIDE_KEYS: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "household": (
        ("household_profile_id", "householdProfileId"),
        ("household_user_id", "householdUserId", "household_id", "householdId"),
    ),
    "househelp": (
        ("househelp_profile_id", "househelpProfileId"),
        ("househelp_user_id", "househelpUserId", "househelp_id", "househelpId"),
    ),
}


def _get(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key)
    return None


def _first_identifier(value: Any) -> str | None:
    for key in _ID_KEYS:
        normalized = normalize_identifier(_get(value, key))
        if normalized:
            return normalized
    return None


def extract_conversation_id(response: Any) -> str | None:
    """Return the conversation id from a create/list entry, or None if unresolved."""
    return _first_identifier(response) or _first_identifier(_get(response, "data"))


def conversation_record_from_raw(raw: Mapping[str, Any]) -> ConversationRecord:
    """Build a ConversationRecord from one raw backend conversation entry."""
    sides: dict[str, tuple[list[str], list[str]]] = {}
    for side, (profile_keys, user_keys) in _SIDE_KEYS.items():
        nested = _get(raw, side)
        profile_ids = unique_identifiers(
            [raw.get(key) for key in profile_keys] + [_get(nested, "id")]
        )
        user_ids = unique_identifiers(
            [raw.get(key) for key in user_keys]
            + [_get(nested, "user_id"), _get(nested, "userId")]
        )
        sides[side] = (profile_ids, user_ids)

    return ConversationRecord(
        id=extract_conversation_id(raw),
        household_profile_ids=tuple(sides["household"][0]),
        household_user_ids=tuple(sides["household"][1]),
        househelp_profile_ids=tuple(sides["househelp"][0]),
        househelp_user_ids=tuple(sides["househelp"][1]),
    )


def _conversation_list(response: Any) -> list[Any]:
    data = _get(response, "data")
    nested = _get(data, "data")
    candidates = (
        _get(response, "conversations"),
        _get(data, "conversations"),
        _get(nested, "conversations"),
        nested,
        data,
    )
    for candidate in candidates:
        # An explicit empty list wins; never fall through to a deeper shape.
        if isinstance(candidate, list):
            return candidate
    return []


def extract_conversations(response: Any) -> list[ConversationRecord]:
    """Return the conversation records from a list response, in backend order."""
    records: list[ConversationRecord] = []
    for entry in _conversation_list(response):
        if not isinstance(entry, Mapping):
            logger.debug(
                "Skipping non-object conversation entry",
                entry_type=type(entry).__name__,
            )
            continue
        records.append(conversation_record_from_raw(entry))
    return records
