"""
Conversation launcher.

Resolves one canonical conversation id for a household/househelp pairing:
list and match, create only when nothing matches, and re-list once when the
create response does not yield a trustworthy id.

The sequence is check-then-act. Two callers racing on the same pairing can
still both create; only a backend uniqueness constraint on the pair closes
that window.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

import structlog

from homebit_inbox.config import get_settings
from homebit_inbox.conversations.extraction import (
    extract_conversation_id,
    extract_conversations,
)
from homebit_inbox.conversations.matching import match_conversation
from homebit_inbox.conversations.types import (
    ConversationRecord,
    StartConversationPayload,
    coerce_payload,
)
from homebit_inbox.kernel.errors import ConversationStartError, MalformedResponseError
from homebit_inbox.kernel.ids import is_conversation_id
from homebit_inbox.monitoring.metrics import (
    conversation_list_failures_total,
    record_resolution,
)

if TYPE_CHECKING:
    from homebit_inbox.transport.base import InboxTransport

logger = structlog.get_logger()


async def list_conversations(
    transport: "InboxTransport",
    *,
    limit: int | None = None,
    offset: int | None = None,
) -> list[ConversationRecord]:
    """
    Read a single page of the caller's conversations.

    Any transport failure is logged and reported as an empty list, so the
    launcher can still try to create when the read path is down.
    """
    settings = get_settings()
    limit = settings.conversation_list_limit if limit is None else limit
    offset = settings.conversation_list_offset if offset is None else offset

    try:
        response = await transport.list_conversations(limit=limit, offset=offset)
    except Exception as e:
        conversation_list_failures_total.inc()
        logger.warning(
            "Conversation list failed; treating as empty",
            error=str(e),
            error_type=type(e).__name__,
        )
        return []

    return extract_conversations(response)


async def resolve_conversation_id_from_list(
    transport: "InboxTransport",
    payload: StartConversationPayload,
) -> str | None:
    """List conversations and return the matched conversation's id, if any."""
    conversations = await list_conversations(transport)
    match = match_conversation(payload, conversations)
    if match is None:
        logger.debug(
            "No existing conversation for pairing",
            candidates=len(conversations),
            household_user_id=payload.household_user_id,
            househelp_user_id=payload.househelp_user_id,
        )
        return None
    return match.record.id


async def create_conversation(
    transport: "InboxTransport",
    payload: StartConversationPayload,
) -> str | None:
    """
    Start a conversation for the pairing.

    Returns the new id when the response carries a UUID, otherwise None.
    A failed call raises ConversationStartError.
    """
    try:
        response = await transport.start_conversation(payload)
    except MalformedResponseError as e:
        logger.warning("Start conversation response could not be decoded", error=str(e))
        return None
    except Exception as e:
        logger.error(
            "Start conversation failed",
            error=str(e),
            error_type=type(e).__name__,
            household_user_id=payload.household_user_id,
            househelp_user_id=payload.househelp_user_id,
        )
        raise ConversationStartError() from e

    conversation_id = extract_conversation_id(response)
    if conversation_id is None or not is_conversation_id(conversation_id):
        logger.warning(
            "Start conversation returned no usable id",
            conversation_id=conversation_id,
        )
        return None
    return conversation_id


async def start_or_get_conversation(
    transport: "InboxTransport",
    payload: StartConversationPayload | Mapping[str, Any],
) -> str | None:
    """
    Return the canonical conversation id for a pairing, creating it if needed.

    None means no conversation could be established; callers must not
    substitute a placeholder id.
    """
    payload = coerce_payload(payload)
    log = logger.bind(
        household_user_id=payload.household_user_id,
        househelp_user_id=payload.househelp_user_id,
        household_profile_id=payload.household_profile_id,
        househelp_profile_id=payload.househelp_profile_id,
    )

    existing_id = await resolve_conversation_id_from_list(transport, payload)
    if existing_id and is_conversation_id(existing_id):
        log.info("Conversation resolved from existing list", conversation_id=existing_id)
        record_resolution("match")
        return existing_id

    try:
        created_id = await create_conversation(transport, payload)
    except ConversationStartError:
        record_resolution("start_failed")
        raise
    if created_id:
        log.info("Conversation created", conversation_id=created_id)
        record_resolution("create")
        return created_id

    retried_id = await resolve_conversation_id_from_list(transport, payload)
    if retried_id and is_conversation_id(retried_id):
        log.info("Conversation resolved after create", conversation_id=retried_id)
        record_resolution("retry")
        return retried_id

    log.warning("Conversation could not be resolved", retried_id=retried_id)
    record_resolution("unresolved")
    return None
