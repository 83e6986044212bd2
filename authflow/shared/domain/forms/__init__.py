from .debounce import DebounceCoordinator
from .field_state import (
    INITIAL_FIELD_STATE,
    Blur,
    FieldAction,
    FieldState,
    Reset,
    UserInput,
    Validity,
    email_reducer,
    is_valid_email,
    is_valid_password,
    make_password_reducer,
    make_reducer,
    password_reducer,
)

__all__ = [
    "DebounceCoordinator",
    "INITIAL_FIELD_STATE",
    "Blur",
    "FieldAction",
    "FieldState",
    "Reset",
    "UserInput",
    "Validity",
    "email_reducer",
    "is_valid_email",
    "is_valid_password",
    "make_password_reducer",
    "make_reducer",
    "password_reducer",
]
