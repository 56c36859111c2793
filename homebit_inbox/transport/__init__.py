"""Transports for the inbox conversation endpoints."""

from homebit_inbox.transport.base import AuthCredentials, InboxTransport
from homebit_inbox.transport.http import HttpInboxTransport

__all__ = ["AuthCredentials", "HttpInboxTransport", "InboxTransport"]
