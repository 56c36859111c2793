#!/usr/bin/env python3
"""
Inbox conversation CLI.

Resolve (or create) the conversation for a household/househelp pairing
against a live notifications service, or print an inbox route.

Run with:
  python -m homebit_inbox.cli resolve --household-user-id U1 --househelp-user-id U2 --token $TOKEN
  python -m homebit_inbox.cli route 123e4567-e89b-12d3-a456-426614174000

Exit codes: 0 resolved, 1 unresolved, 2 conversation could not be started.
stdout carries only results; log events and JSON error bodies go to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from homebit_inbox.config import get_settings
from homebit_inbox.conversations import get_inbox_route, start_or_get_conversation
from homebit_inbox.conversations.types import coerce_payload
from homebit_inbox.kernel.errors import ConversationStartError, ValidationError
from homebit_inbox.kernel.logging import configure_logging
from homebit_inbox.transport import AuthCredentials, HttpInboxTransport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="homebit-inbox", description="Homebit inbox conversation tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve or start the conversation for a pairing")
    resolve.add_argument("--household-user-id", required=True)
    resolve.add_argument("--househelp-user-id", required=True)
    resolve.add_argument("--household-profile-id")
    resolve.add_argument("--househelp-profile-id")
    resolve.add_argument("--token", help="Bearer token for the inbox API")
    resolve.add_argument("--profile-id", help="Acting profile id (X-Profile-ID)")
    resolve.add_argument("--profile-type", help="Acting profile type (X-Profile-Type)")
    resolve.add_argument("--base-url", help="Notifications service base URL (defaults to settings)")

    route = subparsers.add_parser("route", help="Print the inbox route for a conversation id")
    route.add_argument("conversation_id", nargs="?", default=None)

    return parser


async def _resolve(args: argparse.Namespace) -> int:
    settings = get_settings()
    payload = coerce_payload(
        {
            "household_user_id": args.household_user_id,
            "househelp_user_id": args.househelp_user_id,
            "household_profile_id": args.household_profile_id,
            "househelp_profile_id": args.househelp_profile_id,
        }
    )
    credentials = AuthCredentials(
        token=args.token,
        profile_id=args.profile_id,
        profile_type=args.profile_type,
    )

    async with HttpInboxTransport(
        args.base_url or settings.notifications_base_url,
        credentials=credentials,
        timeout=settings.request_timeout_seconds,
    ) as transport:
        try:
            conversation_id = await start_or_get_conversation(transport, payload)
        except ConversationStartError as e:
            print(json.dumps(e.to_public_dict()), file=sys.stderr)
            return 2

    if conversation_id is None:
        print("Conversation could not be established", file=sys.stderr)
        return 1

    print(conversation_id)
    print(get_inbox_route(conversation_id))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout carries only command output.
    configure_logging(stream=sys.stderr)

    if args.command == "route":
        print(get_inbox_route(args.conversation_id))
        return 0

    try:
        return asyncio.run(_resolve(args))
    except ValidationError as e:
        print(json.dumps(e.to_public_dict()), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
