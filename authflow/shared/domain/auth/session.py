"""Persisted login state and the session handle shared with every view."""

from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import BaseModel

from authflow.shared.core import events
from authflow.shared.core.configuration import AuthConfig
from authflow.shared.core.event_bus import EventBus
from authflow.shared.infrastructure.persistence.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class AuthSession(BaseModel):
    is_logged_in: bool = False


class AuthSessionStore:
    """Keeps ``AuthSession`` mirrored in a durable key-value slot.

    The slot holds ``config.logged_in_marker`` while logged in and is removed
    on logout. Credentials are never stored.
    """

    def __init__(self, kv_store: KeyValueStore, config: Optional[AuthConfig] = None):
        self.kv_store = kv_store
        self.config = config or AuthConfig()
        self._session = AuthSession()

    @property
    def session(self) -> AuthSession:
        return self._session

    @property
    def is_logged_in(self) -> bool:
        return self._session.is_logged_in

    def restore(self) -> AuthSession:
        """Read the slot once, as done at startup."""
        stored = self.kv_store.get(self.config.storage_key)
        self._session = AuthSession(is_logged_in=stored == self.config.logged_in_marker)
        logger.info(f"Restored session: logged_in={self._session.is_logged_in}")
        return self._session

    def login(self, email: str, password: str) -> AuthSession:
        # No real authentication; any submitted pair logs in
        self.kv_store.set(self.config.storage_key, self.config.logged_in_marker)
        self._session = AuthSession(is_logged_in=True)
        logger.info("User logged in")
        return self._session

    def logout(self) -> AuthSession:
        self.kv_store.remove(self.config.storage_key)
        self._session = AuthSession(is_logged_in=False)
        logger.info("User logged out")
        return self._session


class SessionContext:
    """Session handle passed explicitly to views and controllers.

    Exposes the logged-in flag for reading and only ``login``/``logout`` for
    mutation. Every change is republished on ``auth.changed`` so subscribed
    state can follow without holding a reference to the store.
    """

    def __init__(self, store: AuthSessionStore, event_bus: Optional[EventBus] = None):
        self._store = store
        self.bus = event_bus

    @property
    def is_logged_in(self) -> bool:
        return self._store.is_logged_in

    def restore(self) -> bool:
        return self._store.restore().is_logged_in

    async def login(self, email: str, password: str) -> None:
        self._store.login(email, password)
        await self._broadcast()
        await self._push_log("Logged in", "success")

    async def logout(self) -> None:
        self._store.logout()
        await self._broadcast()
        await self._push_log("Logged out", "info")

    async def _broadcast(self) -> None:
        if self.bus is None:
            return
        await self.bus.publish(
            events.TOPIC_AUTH_CHANGED,
            events.create_auth_changed_event(self._store.is_logged_in),
        )

    async def _push_log(
        self,
        message: str,
        level: Literal["info", "warning", "error", "success"] = "info",
    ) -> None:
        if self.bus is None:
            return
        await self.bus.publish(
            events.TOPIC_LOGS_EVENT,
            events.create_logs_event(message, level, topic=events.TOPIC_AUTH_CHANGED),
        )
