"""
HTTP transport for the inbox API.

Talks to the notifications service REST surface:
- GET  /api/v1/inbox/conversations?offset=<o>&limit=<l>
- POST /api/v1/inbox/conversations

No retries happen here; the launcher owns its single re-list fallback.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from homebit_inbox.config import get_settings
from homebit_inbox.conversations.types import StartConversationPayload
from homebit_inbox.kernel.errors import (
    MalformedResponseError,
    TransportError,
    UnauthorizedError,
)
from homebit_inbox.transport.base import AuthCredentials

logger = structlog.get_logger()

CONVERSATIONS_PATH = "/api/v1/inbox/conversations"


class HttpInboxTransport:
    """InboxTransport over httpx.

    Pass `client` to share a connection pool; otherwise one is created and
    closed by `aclose()` / the async context manager.
    """

    def __init__(
        self,
        base_url: str,
        *,
        credentials: AuthCredentials | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.credentials = credentials or AuthCredentials()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, credentials: AuthCredentials | None = None) -> "HttpInboxTransport":
        settings = get_settings()
        return cls(
            settings.notifications_base_url,
            credentials=credentials,
            timeout=settings.request_timeout_seconds,
        )

    async def __aenter__(self) -> "HttpInboxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @property
    def conversations_url(self) -> str:
        return self.base_url + CONVERSATIONS_PATH

    async def list_conversations(self, *, limit: int, offset: int) -> Any:
        return await self._request(
            "GET",
            self.conversations_url,
            operation="list_conversations",
            params={"offset": offset, "limit": limit},
        )

    async def start_conversation(self, payload: StartConversationPayload) -> Any:
        return await self._request(
            "POST",
            self.conversations_url,
            operation="start_conversation",
            json=payload.to_request_body(),
        )

    async def _request(self, method: str, url: str, *, operation: str, **kwargs: Any) -> Any:
        headers = {"Content-Type": "application/json", **self.credentials.to_headers()}
        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            logger.warning(
                "Inbox request failed",
                operation=operation,
                url=url,
                error=str(e),
            )
            raise TransportError(meta={"operation": operation}) from e

        if response.status_code == 401:
            raise UnauthorizedError(meta={"operation": operation})
        if response.status_code >= 400:
            logger.warning(
                "Inbox request returned error status",
                operation=operation,
                url=url,
                status_code=response.status_code,
            )
            raise TransportError(
                message=f"Inbox request failed with status {response.status_code}",
                meta={"operation": operation, "status_code": response.status_code},
            )

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                meta={"operation": operation, "status_code": response.status_code}
            ) from e
