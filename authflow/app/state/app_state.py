"""Application Shell State Management.

Reactive mirror of the session and log events using FletXr primitives.
"""

from __future__ import annotations

from typing import Any, Dict

from fletx.core import RxBool, RxList, RxStr

from authflow.shared.core import events
from authflow.shared.core.event_bus import EventBus, EventPayload

# Cap on retained log entries
MAX_LOG_ENTRIES = 200


class AppState:
    """Reactive State for the Application Shell.

    Subscribes to EventBus topics and updates reactive properties that the
    shell listens to. ``is_logged_in`` decides whether the login card or the
    home card is shown.
    """

    def __init__(self, event_bus: EventBus, is_logged_in: bool = False) -> None:
        """Initialize application state.

        Args:
            event_bus: The shared event bus
            is_logged_in: Session flag restored at startup
        """
        self.bus = event_bus

        # Session
        self.is_logged_in: RxBool = RxBool(is_logged_in)

        # Status
        self.status_text: RxStr = RxStr("Logged in" if is_logged_in else "Please log in")
        self.form_is_valid: RxBool = RxBool(False)

        # Log entries (each is a dict: {message, level, topic, ts})
        self.logs: RxList[Dict[str, Any]] = RxList([])

        self._started = False

    async def initialize(self) -> None:
        """Bind to EventBus events. Safe to call more than once."""
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_AUTH_CHANGED, self._handle_auth_changed)
        await self.bus.subscribe(events.TOPIC_FORM_VALIDITY, self._handle_form_validity)
        await self.bus.subscribe(events.TOPIC_LOGS_EVENT, self._handle_log_event)

        self._started = True

    async def dispose(self) -> None:
        """Unbind from the EventBus once the page that owns this state closes."""
        if not self._started:
            return

        await self.bus.unsubscribe(events.TOPIC_AUTH_CHANGED, self._handle_auth_changed)
        await self.bus.unsubscribe(events.TOPIC_FORM_VALIDITY, self._handle_form_validity)
        await self.bus.unsubscribe(events.TOPIC_LOGS_EVENT, self._handle_log_event)

        self._started = False

    # --- Event Handlers ---

    async def _handle_auth_changed(self, payload: EventPayload) -> None:
        logged_in = bool(payload.get("is_logged_in"))
        self.is_logged_in.value = logged_in
        self.status_text.value = "Logged in" if logged_in else "Please log in"
        if not logged_in:
            self.form_is_valid.value = False

    async def _handle_form_validity(self, payload: EventPayload) -> None:
        self.form_is_valid.value = bool(payload.get("form_is_valid"))

    async def _handle_log_event(self, payload: EventPayload) -> None:
        if not payload:
            return
        entries = list(self.logs.value)
        entries.append(payload)
        self.logs.value = entries[-MAX_LOG_ENTRIES:]
