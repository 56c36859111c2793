"""Conversation bootstrap and de-duplication."""

from homebit_inbox.conversations.types import (
    ConversationRecord,
    StartConversationPayload,
)
from homebit_inbox.conversations.extraction import (
    extract_conversation_id,
    extract_conversations,
)
from homebit_inbox.conversations.matching import (
    ConversationMatch,
    MatchStrategy,
    find_match,
    match_conversation,
)
from homebit_inbox.conversations.launcher import (
    create_conversation,
    list_conversations,
    resolve_conversation_id_from_list,
    start_or_get_conversation,
)
from homebit_inbox.conversations.routes import get_inbox_route

__all__ = [
    "ConversationMatch",
    "ConversationRecord",
    "MatchStrategy",
    "StartConversationPayload",
    "create_conversation",
    "extract_conversation_id",
    "extract_conversations",
    "find_match",
    "get_inbox_route",
    "list_conversations",
    "match_conversation",
    "resolve_conversation_id_from_list",
    "start_or_get_conversation",
]
