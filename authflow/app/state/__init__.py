"""FletXr Reactive State Management.

Architecture:
- AppState: shell state (session flag, status, logs)
- LoginState: reactive mirror of one login form controller
- Store: container passed explicitly to the shell and views
"""

from .app_state import AppState
from .login_state import LoginState
from .store import Store

__all__ = ["AppState", "LoginState", "Store"]
