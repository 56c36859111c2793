from __future__ import annotations

from urllib.parse import quote

INBOX_ROUTE = "/inbox"

# Characters JavaScript's encodeURIComponent leaves unescaped, besides
# alphanumerics and "_.-~" which quote() always keeps.
_URI_COMPONENT_SAFE = "!*'()"


def get_inbox_route(conversation_id: str | None = None) -> str:
    """Deep link to the inbox, optionally focused on one conversation."""
    if conversation_id:
        return f"{INBOX_ROUTE}?conversation={quote(conversation_id, safe=_URI_COMPONENT_SAFE)}"
    return INBOX_ROUTE
