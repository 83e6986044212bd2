"""Login form controller: binds field events to reducers and gates submission."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Callable, List, Optional

from authflow.shared.core import events
from authflow.shared.core.configuration import FormConfig
from authflow.shared.domain.forms import (
    INITIAL_FIELD_STATE,
    Blur,
    DebounceCoordinator,
    FieldState,
    Reset,
    UserInput,
    email_reducer,
    make_password_reducer,
)
from authflow.shared.domain.forms.field_state import Reducer

if TYPE_CHECKING:
    from authflow.shared.core.event_bus import EventBus
    from authflow.shared.domain.auth import SessionContext

logger = logging.getLogger(__name__)

ControllerListener = Callable[["LoginFormController"], None]


class LoginFormController:
    """Owns the email and password field states of one login form.

    Every dispatch forwards the validity pair to a ``DebounceCoordinator``;
    the submit gate reads the validity it last committed, never the live
    field states.
    """

    def __init__(
        self,
        session: SessionContext,
        *,
        config: Optional[FormConfig] = None,
        delay: Optional[float] = None,
        event_bus: Optional[EventBus] = None,
        email_reducer: Reducer = email_reducer,
        password_reducer: Optional[Reducer] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.session = session
        self.config = config or FormConfig()
        self.bus = event_bus
        self._email_reducer = email_reducer
        self._password_reducer = password_reducer or make_password_reducer(
            self.config.password_min_length
        )

        self._email: FieldState = INITIAL_FIELD_STATE
        self._password: FieldState = INITIAL_FIELD_STATE
        self._listeners: List[ControllerListener] = []
        self._torn_down = False

        self.coordinator = DebounceCoordinator(
            self.config.debounce_delay if delay is None else delay,
            on_commit=self._on_commit,
            loop=loop,
        )
        # First observation arms the initial check, like a mount-time effect
        self.coordinator.observe(self._email.validity, self._password.validity)

    # --- Read access ---

    @property
    def email(self) -> FieldState:
        return self._email

    @property
    def password(self) -> FieldState:
        return self._password

    @property
    def email_invalid(self) -> bool:
        return self._email.is_invalid

    @property
    def password_invalid(self) -> bool:
        return self._password.is_invalid

    @property
    def form_is_valid(self) -> bool:
        return self.coordinator.form_is_valid

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def add_listener(self, listener: ControllerListener) -> None:
        """Call ``listener(self)`` after every dispatch and every commit."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ControllerListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Field events ---

    def on_email_change(self, text: str) -> None:
        self._dispatch_email(UserInput(value=text))

    def on_email_blur(self) -> None:
        self._dispatch_email(Blur())

    def on_password_change(self, text: str) -> None:
        self._dispatch_password(UserInput(value=text))

    def on_password_blur(self) -> None:
        self._dispatch_password(Blur())

    def reset(self) -> None:
        """Clear both fields."""
        if self._torn_down:
            return
        self._email = self._email_reducer(self._email, Reset())
        self._password = self._password_reducer(self._password, Reset())
        self._after_dispatch()

    async def on_submit(self) -> bool:
        """Log in with the raw field values if the committed validity allows it.

        Returns:
            True if login was invoked
        """
        if self._torn_down:
            logger.debug("Submit ignored: controller torn down")
            return False
        if not self.coordinator.form_is_valid:
            logger.debug("Submit rejected: form is not valid")
            return False

        await self.session.login(self._email.value, self._password.value)
        return True

    def teardown(self) -> None:
        """Cancel any pending check; the controller ignores events afterwards."""
        self.coordinator.teardown()
        self._torn_down = True
        self._listeners.clear()
        logger.debug("Login form controller torn down")

    # --- Internals ---

    def _dispatch_email(self, action) -> None:
        if self._torn_down:
            return
        self._email = self._email_reducer(self._email, action)
        self._after_dispatch()

    def _dispatch_password(self, action) -> None:
        if self._torn_down:
            return
        self._password = self._password_reducer(self._password, action)
        self._after_dispatch()

    def _after_dispatch(self) -> None:
        self.coordinator.observe(self._email.validity, self._password.validity)
        self._notify()

    def _on_commit(self, form_is_valid: bool) -> None:
        if self.bus is not None:
            self.bus.publish_nowait(
                events.TOPIC_FORM_VALIDITY,
                events.create_form_validity_event(form_is_valid),
            )
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as exc:
                logger.exception(f"Login form listener failed: {exc}")
