import json
from unittest.mock import AsyncMock

import pytest

from homebit_inbox import cli
from homebit_inbox.kernel.errors import ConversationStartError

pytestmark = pytest.mark.unit

CONV_ID = "923e4567-e89b-12d3-a456-426614174000"


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)


def _resolve_args(*extra: str) -> list[str]:
    return ["resolve", "--household-user-id", "household-123", "--househelp-user-id", "househelp-456", *extra]


def test_route_command(capsys):
    assert cli.main(["route", "id with spaces"]) == 0
    assert capsys.readouterr().out.strip() == "/inbox?conversation=id%20with%20spaces"


def test_route_command_without_id(capsys):
    assert cli.main(["route"]) == 0
    assert capsys.readouterr().out.strip() == "/inbox"


def test_resolve_prints_id_and_route(monkeypatch, capsys):
    launcher = AsyncMock(return_value=CONV_ID)
    monkeypatch.setattr(cli, "start_or_get_conversation", launcher)

    exit_code = cli.main(_resolve_args("--househelp-profile-id", "hp-profile", "--token", "jwt"))

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [CONV_ID, f"/inbox?conversation={CONV_ID}"]
    transport, payload = launcher.await_args.args
    assert transport.credentials.token == "jwt"
    assert payload.househelp_profile_id == "hp-profile"
    assert payload.household_profile_id is None


def test_resolve_unresolved_exits_1(monkeypatch, capsys):
    monkeypatch.setattr(cli, "start_or_get_conversation", AsyncMock(return_value=None))

    assert cli.main(_resolve_args()) == 1
    assert "could not be established" in capsys.readouterr().err


def test_resolve_start_failure_exits_2(monkeypatch, capsys):
    monkeypatch.setattr(cli, "start_or_get_conversation", AsyncMock(side_effect=ConversationStartError()))

    assert cli.main(_resolve_args("--base-url", "https://inbox.example.com")) == 2
    error = json.loads(capsys.readouterr().err)
    assert error == {"detail": "Failed to start conversation", "code": "conversation.start_failed"}


def test_resolve_rejects_blank_user_id(capsys):
    assert cli.main(["resolve", "--household-user-id", " ", "--househelp-user-id", "hp"]) == 2
    error = json.loads(capsys.readouterr().err)
    assert error["code"] == "request.validation_error"
    assert error["detail"] == "Invalid conversation payload"
    assert error["meta"]["errors"]
