import pytest

from homebit_inbox.config import Settings, get_settings

pytestmark = pytest.mark.unit


def test_defaults(monkeypatch):
    monkeypatch.delenv("NOTIFICATIONS_BASE_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.notifications_base_url == "http://localhost:8080"
    assert settings.conversation_list_limit == 100
    assert settings.conversation_list_offset == 0
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("NOTIFICATIONS_BASE_URL", "https://api.homebit.test")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("LOG_FORMAT", "text")

    settings = get_settings()

    assert settings.notifications_base_url == "https://api.homebit.test"
    assert settings.request_timeout_seconds == 2.5
    assert settings.log_format == "text"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
