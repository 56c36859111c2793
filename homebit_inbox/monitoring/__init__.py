"""Monitoring for the inbox client."""

from homebit_inbox.monitoring.metrics import (
    conversation_list_failures_total,
    conversation_resolutions_total,
    record_resolution,
)

__all__ = [
    "conversation_list_failures_total",
    "conversation_resolutions_total",
    "record_resolution",
]
