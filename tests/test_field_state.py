import pytest
from pydantic import ValidationError

from authflow.shared.domain.forms import (
    INITIAL_FIELD_STATE,
    Blur,
    FieldState,
    Reset,
    UserInput,
    Validity,
    email_reducer,
    make_password_reducer,
    make_reducer,
    password_reducer,
)


@pytest.mark.parametrize("value, expected", [
    ("a@b.com", Validity.VALID),
    ("@", Validity.VALID),
    ("plainaddress", Validity.INVALID),
    ("", Validity.INVALID),
])
def test_email_user_input_uses_at_sign(value, expected):
    state = email_reducer(INITIAL_FIELD_STATE, UserInput(value=value))

    assert state.value == value
    assert state.validity is expected


@pytest.mark.parametrize("value, expected", [
    ("short", Validity.INVALID),
    ("123456", Validity.INVALID),
    ("1234567", Validity.VALID),
    ("   123456   ", Validity.INVALID),
    ("  secret12  ", Validity.VALID),
])
def test_password_user_input_uses_stripped_length(value, expected):
    state = password_reducer(INITIAL_FIELD_STATE, UserInput(value=value))

    assert state.value == value
    assert state.validity is expected


def test_user_input_keeps_raw_value_untrimmed():
    state = password_reducer(INITIAL_FIELD_STATE, UserInput(value="  secret12  "))
    assert state.value == "  secret12  "


@pytest.mark.parametrize("reducer, start", [
    (email_reducer, FieldState(value="x@y", validity=Validity.VALID)),
    (email_reducer, FieldState(value="nope")),
    (password_reducer, FieldState(value="short", validity=Validity.UNKNOWN)),
    (password_reducer, INITIAL_FIELD_STATE),
])
def test_blur_never_changes_value(reducer, start):
    assert reducer(start, Blur()).value == start.value


def test_blur_recomputes_validity_from_stored_value():
    unchecked = FieldState(value="a@b.com")

    assert email_reducer(unchecked, Blur()).validity is Validity.VALID
    assert email_reducer(FieldState(value="ab.com"), Blur()).validity is Validity.INVALID


def test_blur_on_untouched_field_marks_it_invalid():
    state = password_reducer(INITIAL_FIELD_STATE, Blur())

    assert state.value == ""
    assert state.is_invalid


def test_reset_returns_initial_state():
    typed = email_reducer(INITIAL_FIELD_STATE, UserInput(value="a@b.com"))

    assert email_reducer(typed, Reset()) == INITIAL_FIELD_STATE
    assert email_reducer(typed, Reset()).validity is Validity.UNKNOWN


def test_unrecognized_action_falls_back_to_reset():
    typed = email_reducer(INITIAL_FIELD_STATE, UserInput(value="a@b.com"))

    assert email_reducer(typed, object()) == INITIAL_FIELD_STATE
    assert email_reducer(typed, {"type": "user_input", "value": "x"}) == INITIAL_FIELD_STATE


def test_reducer_does_not_mutate_input_state():
    start = FieldState(value="abc")
    email_reducer(start, UserInput(value="a@b"))

    assert start == FieldState(value="abc")
    with pytest.raises(ValidationError):
        start.value = "changed"


def test_invalid_marker_only_for_explicit_invalid():
    assert not FieldState(validity=Validity.UNKNOWN).is_invalid
    assert not FieldState(validity=Validity.VALID).is_invalid
    assert FieldState(validity=Validity.INVALID).is_invalid


def test_custom_predicate_and_password_length():
    digits = make_reducer(str.isdigit)
    assert digits(INITIAL_FIELD_STATE, UserInput(value="123")).is_valid

    strict = make_password_reducer(min_length=10)
    assert not strict(INITIAL_FIELD_STATE, UserInput(value="123456789")).is_valid
    assert strict(INITIAL_FIELD_STATE, UserInput(value="1234567890")).is_valid
