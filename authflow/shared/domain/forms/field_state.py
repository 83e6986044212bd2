"""Field state reducers for the login form.

Each input field owns a ``FieldState`` that only changes through a reducer:

    state = email_reducer(state, UserInput(value="a@b.com"))
    state = email_reducer(state, Blur())

Reducers are pure and total. ``UserInput`` and ``Blur`` recompute validity
with the field's predicate; ``Reset`` and any action the reducer does not
recognise return the initial state.
"""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Any, Callable, Literal, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field


class Validity(str, Enum):
    """Tri-state validity of a single field."""
    UNKNOWN = "unknown"
    VALID = "valid"
    INVALID = "invalid"

    @classmethod
    def of(cls, passed: bool) -> "Validity":
        return cls.VALID if passed else cls.INVALID


class FieldState(BaseModel):
    """Current value of an input field and its last computed validity."""
    model_config = ConfigDict(frozen=True)

    value: str = ""
    validity: Validity = Validity.UNKNOWN

    @property
    def is_valid(self) -> bool:
        return self.validity is Validity.VALID

    @property
    def is_invalid(self) -> bool:
        """True only after a check failed; an unchecked field is not invalid."""
        return self.validity is Validity.INVALID


INITIAL_FIELD_STATE = FieldState()


class UserInput(BaseModel):
    """The user typed; carries the full new text of the field."""
    model_config = ConfigDict(frozen=True)

    type: Literal["user_input"] = "user_input"
    value: str = Field(default="")


class Blur(BaseModel):
    """The field lost focus."""
    model_config = ConfigDict(frozen=True)

    type: Literal["blur"] = "blur"


class Reset(BaseModel):
    """Return the field to its initial state."""
    model_config = ConfigDict(frozen=True)

    type: Literal["reset"] = "reset"


FieldAction: TypeAlias = Union[UserInput, Blur, Reset]
Predicate: TypeAlias = Callable[[str], bool]
Reducer: TypeAlias = Callable[[FieldState, Any], FieldState]


def is_valid_email(value: str) -> bool:
    return "@" in value


def is_valid_password(value: str, min_length: int = 7) -> bool:
    return len(value.strip()) >= min_length


def reduce_field(predicate: Predicate, state: FieldState, action: Any) -> FieldState:
    """Compute the next state of a field validated by ``predicate``."""
    if isinstance(action, UserInput):
        return FieldState(value=action.value, validity=Validity.of(predicate(action.value)))
    if isinstance(action, Blur):
        return FieldState(value=state.value, validity=Validity.of(predicate(state.value)))
    return INITIAL_FIELD_STATE


def make_reducer(predicate: Predicate) -> Reducer:
    """Bind a validation predicate into a ``(state, action) -> state`` reducer."""
    return partial(reduce_field, predicate)


def make_password_reducer(min_length: int = 7) -> Reducer:
    return make_reducer(partial(is_valid_password, min_length=min_length))


email_reducer: Reducer = make_reducer(is_valid_email)
password_reducer: Reducer = make_password_reducer()
