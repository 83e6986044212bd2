from .login_controller import LoginFormController

__all__ = ["LoginFormController"]
