"""Shared fixtures for the AuthFlow test-suite."""

import pytest

from authflow.shared.core.event_bus import EventBus
from authflow.shared.domain.auth import AuthSessionStore, SessionContext
from authflow.shared.infrastructure.persistence.kv_store import InMemoryKeyValueStore


class LoginRecorder:
    """Session stand-in that records login calls."""

    def __init__(self):
        self.calls = []
        self.is_logged_in = False

    async def login(self, email, password):
        self.calls.append((email, password))
        self.is_logged_in = True

    async def logout(self):
        self.is_logged_in = False


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def session(kv_store, event_bus):
    return SessionContext(AuthSessionStore(kv_store), event_bus)


@pytest.fixture
def recorder():
    return LoginRecorder()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        "FORM_DEBOUNCE_DELAY_MS",
        "FORM_PASSWORD_MIN_LENGTH",
        "AUTH_STORAGE_KEY",
        "AUTH_STORAGE_PATH",
        "FLET_WEB_MODE",
        "FLET_PORT",
        "FLET_WEB_RENDERER",
    ):
        monkeypatch.delenv(key, raising=False)
