"""
Shared Domain Module
====================

Business logic independent of the UI toolkit.

Modules:
- forms: field reducers and the debounced form validity coordinator
- auth: persisted login state and the session handle
"""

from .auth import AuthSession, AuthSessionStore, SessionContext
from .forms import DebounceCoordinator, FieldState, Validity

__all__ = [
    "AuthSession",
    "AuthSessionStore",
    "SessionContext",
    "DebounceCoordinator",
    "FieldState",
    "Validity",
]
