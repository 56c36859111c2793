"""
Conversation Type Definitions

Input pairing for conversation bootstrap and the read-only view of a
conversation reconstructed from backend responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from homebit_inbox.kernel.errors import ValidationError
from homebit_inbox.kernel.ids import normalize_identifier


class StartConversationPayload(BaseModel):
    """
    The household/househelp pairing a conversation represents.

    User ids are always present. Profile ids refine the pairing, since a user
    may have several profiles over time. Accepts snake_case or camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    household_user_id: str
    househelp_user_id: str
    household_profile_id: str | None = None
    househelp_profile_id: str | None = None

    @field_validator("household_user_id", "househelp_user_id", mode="before")
    @classmethod
    def _require_user_id(cls, value: Any) -> str:
        normalized = normalize_identifier(value)
        if normalized is None:
            raise ValueError("user id must be a non-empty string")
        return normalized

    @field_validator("household_profile_id", "househelp_profile_id", mode="before")
    @classmethod
    def _optional_profile_id(cls, value: Any) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("profile id must be a string")
        return normalize_identifier(value)

    def to_request_body(self) -> dict[str, str]:
        """Serialize for the start-conversation call, omitting absent profile ids."""
        return self.model_dump(exclude_none=True)


def coerce_payload(
    payload: StartConversationPayload | Mapping[str, Any],
) -> StartConversationPayload:
    """Accept a payload model or a plain mapping; raise ValidationError when invalid."""
    if isinstance(payload, StartConversationPayload):
        return payload
    try:
        return StartConversationPayload.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise ValidationError(
            message="Invalid conversation payload",
            meta={"errors": [err["msg"] for err in exc.errors()]},
        ) from exc


@dataclass(frozen=True)
class ConversationRecord:
    """Transient view of one backend conversation's identifying fields.

    Each side keeps every candidate identifier found across the backend's
    shapes (flat, camelCase, nested), normalized and de-duplicated.
    """

    id: str | None
    household_user_ids: tuple[str, ...] = ()
    househelp_user_ids: tuple[str, ...] = ()
    household_profile_ids: tuple[str, ...] = ()
    househelp_profile_ids: tuple[str, ...] = ()
