from .session import AuthSession, AuthSessionStore, SessionContext

__all__ = ["AuthSession", "AuthSessionStore", "SessionContext"]
