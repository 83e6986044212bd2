"""Login card: email and password inputs plus the submit button."""

from __future__ import annotations

import logging
from typing import Optional

import flet as ft

from authflow.app.controllers.login_controller import LoginFormController
from authflow.app.state import LoginState, Store
from authflow.app.ui.theme import (
    BG_BUTTON_DISABLED,
    BG_CARD,
    MAGENTA_PRIMARY,
    TEXT_BRIGHT,
    TEXT_DARK,
    get_input_colors,
)
from authflow.shared.core.configuration import FormConfig

logger = logging.getLogger(__name__)


class LoginView:
    """One mounted login form.

    Owns a ``LoginFormController`` for as long as the card is on screen;
    ``dispose`` must be called when the card is replaced.
    """

    def __init__(self, page: ft.Page, store: Store, config: Optional[FormConfig] = None):
        self.page = page
        self.store = store
        self.controller = LoginFormController(
            store.session,
            config=config,
            event_bus=store.bus,
        )
        self.state = LoginState()

        self._email_field: Optional[ft.TextField] = None
        self._password_field: Optional[ft.TextField] = None
        self._submit_button: Optional[ft.ElevatedButton] = None

    def build_view(self) -> ft.Control:
        self._email_field = ft.TextField(
            label="E-Mail",
            keyboard_type=ft.KeyboardType.EMAIL,
            color=TEXT_DARK,
            on_change=self._on_email_change,
            on_blur=self._on_email_blur,
            on_submit=self._on_submit,
        )
        self._password_field = ft.TextField(
            label="Password",
            password=True,
            can_reveal_password=True,
            color=TEXT_DARK,
            on_change=self._on_password_change,
            on_blur=self._on_password_blur,
            on_submit=self._on_submit,
        )
        self._submit_button = ft.ElevatedButton(
            "Login",
            on_click=self._on_submit,
            disabled=True,
            bgcolor=BG_BUTTON_DISABLED,
            color=TEXT_BRIGHT,
        )

        self.state.bind(self.controller)
        self.state.email_invalid.listen(self._sync_fields)
        self.state.password_invalid.listen(self._sync_fields)
        self.state.form_is_valid.listen(self._sync_button)
        self._sync_fields(update=False)
        self._sync_button(update=False)

        return ft.Container(
            width=640,
            bgcolor=BG_CARD,
            border_radius=10,
            padding=ft.padding.symmetric(vertical=28, horizontal=32),
            margin=ft.margin.only(top=80),
            content=ft.Column(
                [
                    self._email_field,
                    self._password_field,
                    ft.Row([self._submit_button], alignment=ft.MainAxisAlignment.CENTER),
                ],
                spacing=16,
            ),
        )

    def dispose(self) -> None:
        self.state.unbind()
        self.controller.teardown()

    # --- Event Handlers ---

    async def _on_email_change(self, e) -> None:
        self.controller.on_email_change(e.control.value or "")

    async def _on_email_blur(self, e) -> None:
        self.controller.on_email_blur()

    async def _on_password_change(self, e) -> None:
        self.controller.on_password_change(e.control.value or "")

    async def _on_password_blur(self, e) -> None:
        self.controller.on_password_blur()

    async def _on_submit(self, e) -> None:
        submitted = await self.controller.on_submit()
        if not submitted:
            logger.debug("Login form not submitted")

    # --- Sync ---

    def _sync_fields(self, e=None, update: bool = True) -> None:
        for field, invalid in (
            (self._email_field, self.state.email_invalid.value),
            (self._password_field, self.state.password_invalid.value),
        ):
            if field is None:
                continue
            border, fill = get_input_colors(invalid)
            field.border_color = border
            field.bgcolor = fill
            field.filled = True
        if update:
            self._update()

    def _sync_button(self, e=None, update: bool = True) -> None:
        if self._submit_button is None:
            return
        enabled = self.state.form_is_valid.value
        self._submit_button.disabled = not enabled
        self._submit_button.bgcolor = MAGENTA_PRIMARY if enabled else BG_BUTTON_DISABLED
        if update:
            self._update()

    def _update(self) -> None:
        try:
            self.page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass
