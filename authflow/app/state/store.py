"""Application State Store.

Bundles the reactive state and the session handle that the shell hands down
to every view. Each page builds its own store over the process-wide event bus
and session; there is no global lookup.
"""

from __future__ import annotations

from .app_state import AppState
from authflow.shared.core.event_bus import EventBus
from authflow.shared.domain.auth import SessionContext


class Store:
    """State container for one page.

    Usage:
        # When a page connects
        store = Store(event_bus, session)
        await store.app.initialize()

        # Views receive it as an argument
        build_shell(page, store, config)
    """

    def __init__(self, event_bus: EventBus, session: SessionContext) -> None:
        self.bus = event_bus
        self.session = session
        self.app = AppState(event_bus, is_logged_in=session.is_logged_in)
