"""
Test Configuration and Fixtures

Shared fixtures for the inbox client suite: an in-memory fake of the inbox
transport and settings isolation.
"""

import os
from typing import Any
from unittest.mock import AsyncMock

import pytest

# Set test environment variables before importing the package.
os.environ.setdefault("NOTIFICATIONS_BASE_URL", "https://notifications.example.com")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from homebit_inbox.config import get_settings


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (may use real services)")


def pytest_collection_modifyitems(config, items):
    """
    Auto-assign tier markers so we can run `pytest -m unit`.

    Convention:
    - tests/integration/** => integration
    - everything else      => unit
    """
    for item in items:
        path = str(getattr(item, "fspath", ""))
        if item.get_closest_marker("integration") or item.get_closest_marker("unit"):
            continue
        if "/tests/integration/" in path:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Each test sees settings derived from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# TRANSPORT FIXTURES
# =============================================================================


@pytest.fixture
def mock_transport() -> Any:
    """Inbox transport whose list/start calls are AsyncMocks.

    Queue responses with `side_effect` lists; exceptions in the list are raised.
    """
    transport = AsyncMock()
    transport.list_conversations = AsyncMock(return_value={"conversations": []})
    transport.start_conversation = AsyncMock(return_value={"id": "123e4567-e89b-12d3-a456-426614174000"})
    return transport


@pytest.fixture
def full_payload() -> dict[str, str]:
    return {
        "household_user_id": "household-123",
        "househelp_user_id": "househelp-456",
        "household_profile_id": "profile-household-789",
        "househelp_profile_id": "profile-househelp-012",
    }


@pytest.fixture
def user_payload() -> dict[str, str]:
    return {
        "household_user_id": "household-123",
        "househelp_user_id": "househelp-456",
    }
