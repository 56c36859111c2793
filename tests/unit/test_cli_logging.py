"""
CLI output with the real logging setup: events on stderr, results on stdout.
"""

import json
from unittest.mock import AsyncMock

import pytest
import structlog

from homebit_inbox import cli
from homebit_inbox.conversations import extraction, launcher, matching
from homebit_inbox.transport import http
from homebit_inbox.transport.http import HttpInboxTransport

pytestmark = pytest.mark.unit

CONV_ID = "923e4567-e89b-12d3-a456-426614174000"


@pytest.fixture(autouse=True)
def _isolated_structlog(monkeypatch):
    """Fresh module loggers so cached bound loggers do not outlive the test."""
    for module in (launcher, extraction, matching, http):
        monkeypatch.setattr(module, "logger", structlog.get_logger())
    yield
    structlog.reset_defaults()


def test_resolve_keeps_log_events_off_stdout(monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_FORMAT", "json")
    request = AsyncMock(side_effect=[{"conversations": []}, {"id": CONV_ID}])
    monkeypatch.setattr(HttpInboxTransport, "_request", request)

    exit_code = cli.main(
        ["resolve", "--household-user-id", "household-123", "--househelp-user-id", "househelp-456"]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.splitlines() == [CONV_ID, f"/inbox?conversation={CONV_ID}"]
    events = [json.loads(line) for line in captured.err.splitlines()]
    assert any(
        event["event"] == "Conversation created" and event["conversation_id"] == CONV_ID
        for event in events
    )
    assert request.await_count == 2
