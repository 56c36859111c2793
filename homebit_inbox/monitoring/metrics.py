"""
Prometheus Metrics

Counters for conversation resolution outcomes. Exposing them (HTTP endpoint,
push gateway) is left to the host application.
"""

from typing import Literal

from prometheus_client import Counter

ResolutionOutcome = Literal["match", "create", "retry", "unresolved", "start_failed"]

conversation_resolutions_total = Counter(
    "homebit_conversation_resolutions_total",
    "Total conversation resolutions by terminal outcome",
    ["outcome"],
)

conversation_list_failures_total = Counter(
    "homebit_conversation_list_failures_total",
    "Conversation list calls that failed and were treated as empty",
)


def record_resolution(outcome: ResolutionOutcome) -> None:
    conversation_resolutions_total.labels(outcome=outcome).inc()
