"""Reactive view of one login form."""

from __future__ import annotations

from typing import Optional

from fletx.core import RxBool, RxStr

from authflow.app.controllers.login_controller import LoginFormController


class LoginState:
    """Mirrors a ``LoginFormController`` into FletXr reactive values.

    The login view listens to these instead of polling the controller.
    """

    def __init__(self) -> None:
        self.email_value: RxStr = RxStr("")
        self.password_value: RxStr = RxStr("")
        self.email_invalid: RxBool = RxBool(False)
        self.password_invalid: RxBool = RxBool(False)
        self.form_is_valid: RxBool = RxBool(False)

        self._controller: Optional[LoginFormController] = None

    def bind(self, controller: LoginFormController) -> None:
        """Follow ``controller``, dropping any previous binding."""
        self.unbind()
        self._controller = controller
        controller.add_listener(self.sync)
        self.sync(controller)

    def unbind(self) -> None:
        if self._controller is not None:
            self._controller.remove_listener(self.sync)
            self._controller = None

    def sync(self, controller: LoginFormController) -> None:
        self.email_value.value = controller.email.value
        self.password_value.value = controller.password.value
        self.email_invalid.value = controller.email_invalid
        self.password_invalid.value = controller.password_invalid
        self.form_is_valid.value = controller.form_is_valid
