"""Homebit inbox client: resolve one canonical conversation per pairing."""

from homebit_inbox.conversations import (
    ConversationRecord,
    StartConversationPayload,
    get_inbox_route,
    start_or_get_conversation,
)
from homebit_inbox.kernel.errors import ConversationStartError, InboxError
from homebit_inbox.transport import AuthCredentials, HttpInboxTransport, InboxTransport

__version__ = "0.1.0"

__all__ = [
    "AuthCredentials",
    "ConversationRecord",
    "ConversationStartError",
    "HttpInboxTransport",
    "InboxError",
    "InboxTransport",
    "StartConversationPayload",
    "get_inbox_route",
    "start_or_get_conversation",
]
