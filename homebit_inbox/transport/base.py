"""Transport contract consumed by the conversation launcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from homebit_inbox.conversations.types import StartConversationPayload


@dataclass(frozen=True)
class AuthCredentials:
    """Caller-supplied authentication metadata, opaque to the launcher."""

    token: str | None = None
    profile_id: str | None = None
    profile_type: str | None = None

    def to_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if self.profile_id:
            headers["X-Profile-ID"] = self.profile_id
        if self.profile_type:
            headers["X-Profile-Type"] = self.profile_type
        return headers


@runtime_checkable
class InboxTransport(Protocol):
    """
    Authenticated access to the inbox conversation endpoints.

    Both methods return the decoded response body in whatever envelope the
    backend used. Implementations raise on transport failure or non-OK status,
    and raise MalformedResponseError for an OK response whose body cannot be
    decoded.
    """

    async def list_conversations(self, *, limit: int, offset: int) -> Any:
        ...

    async def start_conversation(self, payload: StartConversationPayload) -> Any:
        ...
