"""
Conversation matching.

Decides whether an existing conversation already represents a pairing.
Strategies run in strict precedence and stop at the first that finds a
candidate:

1. Profile pair: both profile ids on the payload match the conversation.
2. Househelp profile + household user: covers rows whose household profile
   id was never set.
3. User pair: safety net for older conversations without profile ids.

Profile identity is the more specific key once a user has had several
profiles; user identity catches the rest.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

import structlog

from homebit_inbox.conversations.types import ConversationRecord, StartConversationPayload
from homebit_inbox.kernel.ids import identifiers_intersect, unique_identifiers

logger = structlog.get_logger()


class MatchStrategy(str, Enum):
    """Which rule matched a conversation to a pairing."""

    PROFILE_PAIR = "profile_pair"
    HOUSEHELP_PROFILE_HOUSEHOLD_USER = "househelp_profile_household_user"
    USER_PAIR = "user_pair"


@dataclass(frozen=True)
class ConversationMatch:
    record: ConversationRecord
    strategy: MatchStrategy


_Predicate = Callable[[ConversationRecord], bool]


def _profile_pair(payload: StartConversationPayload) -> _Predicate | None:
    if not (payload.household_profile_id and payload.househelp_profile_id):
        return None
    household = unique_identifiers([payload.household_profile_id])
    househelp = unique_identifiers([payload.househelp_profile_id])
    return lambda record: identifiers_intersect(
        household, record.household_profile_ids
    ) and identifiers_intersect(househelp, record.househelp_profile_ids)


def _househelp_profile_household_user(payload: StartConversationPayload) -> _Predicate | None:
    if not payload.househelp_profile_id:
        return None
    househelp = unique_identifiers([payload.househelp_profile_id])
    household = unique_identifiers([payload.household_user_id])
    return lambda record: identifiers_intersect(
        househelp, record.househelp_profile_ids
    ) and identifiers_intersect(household, record.household_user_ids)


def _user_pair(payload: StartConversationPayload) -> _Predicate | None:
    household = unique_identifiers([payload.household_user_id])
    househelp = unique_identifiers([payload.househelp_user_id])
    return lambda record: identifiers_intersect(
        household, record.household_user_ids
    ) and identifiers_intersect(househelp, record.househelp_user_ids)


_STRATEGIES: tuple[tuple[MatchStrategy, Callable[[StartConversationPayload], _Predicate | None]], ...] = (
    (MatchStrategy.PROFILE_PAIR, _profile_pair),
    (MatchStrategy.HOUSEHELP_PROFILE_HOUSEHOLD_USER, _househelp_profile_household_user),
    (MatchStrategy.USER_PAIR, _user_pair),
)


def match_conversation(
    payload: StartConversationPayload,
    candidates: Iterable[ConversationRecord],
) -> ConversationMatch | None:
    """Return the first candidate matched by the highest-precedence strategy."""
    records = list(candidates)
    if not records:
        return None

    for strategy, build_predicate in _STRATEGIES:
        predicate = build_predicate(payload)
        if predicate is None:
            continue
        for record in records:
            if predicate(record):
                logger.debug(
                    "Matched existing conversation",
                    strategy=strategy.value,
                    conversation_id=record.id,
                )
                return ConversationMatch(record=record, strategy=strategy)
    return None


def find_match(
    payload: StartConversationPayload,
    candidates: Iterable[ConversationRecord],
) -> ConversationRecord | None:
    match = match_conversation(payload, candidates)
    return match.record if match else None
