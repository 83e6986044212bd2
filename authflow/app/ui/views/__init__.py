from .home_view import build_home_view
from .login_view import LoginView

__all__ = ["LoginView", "build_home_view"]
