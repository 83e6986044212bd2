import asyncio

import pytest

from authflow.app.controllers.login_controller import LoginFormController
from authflow.shared.core import events
from authflow.shared.core.configuration import FormConfig
from authflow.shared.domain.forms import Validity

DELAY = 0.05


@pytest.mark.asyncio
async def test_email_valid_and_short_password_invalid_after_blur(recorder):
    controller = LoginFormController(recorder, delay=DELAY)

    controller.on_email_change("a@b.com")
    controller.on_email_blur()
    controller.on_password_change("short")
    controller.on_password_blur()

    assert controller.email.validity is Validity.VALID
    assert not controller.email_invalid
    assert controller.password_invalid
    controller.teardown()


@pytest.mark.asyncio
async def test_untouched_fields_show_no_marker(recorder):
    controller = LoginFormController(recorder, delay=DELAY)

    assert controller.email.validity is Validity.UNKNOWN
    assert not controller.email_invalid
    assert not controller.password_invalid
    controller.teardown()


@pytest.mark.asyncio
async def test_blur_without_typing_marks_field_invalid(recorder):
    controller = LoginFormController(recorder, delay=DELAY)

    controller.on_email_blur()

    assert controller.email.value == ""
    assert controller.email_invalid
    controller.teardown()


@pytest.mark.asyncio
async def test_valid_form_enables_submit_and_logs_in_with_raw_values(recorder):
    controller = LoginFormController(recorder, delay=DELAY)

    controller.on_email_change("test@example.com")
    controller.on_password_change("  hunter22 ")
    assert controller.form_is_valid is False

    await asyncio.sleep(DELAY * 3)
    assert controller.form_is_valid is True

    assert await controller.on_submit() is True
    assert recorder.calls == [("test@example.com", "  hunter22 ")]
    controller.teardown()


@pytest.mark.asyncio
async def test_submit_rejected_before_quiet_period(recorder):
    controller = LoginFormController(recorder, delay=DELAY)

    controller.on_email_change("test@example.com")
    controller.on_password_change("hunter22")

    assert await controller.on_submit() is False
    assert recorder.calls == []
    controller.teardown()


@pytest.mark.asyncio
async def test_submit_rejected_when_form_invalid(recorder):
    controller = LoginFormController(recorder, delay=DELAY)

    controller.on_email_change("test@example.com")
    controller.on_password_change("short")
    await asyncio.sleep(DELAY * 3)

    assert controller.form_is_valid is False
    assert await controller.on_submit() is False
    assert recorder.calls == []
    controller.teardown()


@pytest.mark.asyncio
async def test_form_turns_invalid_again_after_edit(recorder):
    controller = LoginFormController(recorder, delay=DELAY)
    controller.on_email_change("test@example.com")
    controller.on_password_change("hunter22")
    await asyncio.sleep(DELAY * 3)
    assert controller.form_is_valid

    controller.on_email_change("test")
    await asyncio.sleep(DELAY * 3)

    assert controller.form_is_valid is False
    assert await controller.on_submit() is False
    controller.teardown()


@pytest.mark.asyncio
async def test_teardown_cancels_pending_check(recorder):
    controller = LoginFormController(recorder, delay=DELAY)
    notified = []
    controller.add_listener(lambda c: notified.append(c.form_is_valid))

    controller.on_email_change("test@example.com")
    controller.on_password_change("hunter22")
    notified.clear()
    controller.teardown()
    await asyncio.sleep(DELAY * 3)

    assert controller.form_is_valid is False
    assert notified == []
    assert not controller.coordinator.pending


@pytest.mark.asyncio
async def test_events_after_teardown_are_ignored(recorder):
    controller = LoginFormController(recorder, delay=DELAY)
    controller.teardown()

    controller.on_email_change("test@example.com")
    controller.on_password_blur()
    controller.reset()

    assert controller.email.value == ""
    assert controller.password.validity is Validity.UNKNOWN
    assert await controller.on_submit() is False


@pytest.mark.asyncio
async def test_reset_clears_both_fields(recorder):
    controller = LoginFormController(recorder, delay=DELAY)
    controller.on_email_change("x")
    controller.on_password_change("y")

    controller.reset()

    assert controller.email.value == ""
    assert controller.password.value == ""
    assert controller.email.validity is Validity.UNKNOWN
    controller.teardown()


@pytest.mark.asyncio
async def test_listener_sees_dispatches_and_commit(recorder):
    controller = LoginFormController(recorder, delay=DELAY)
    seen = []
    controller.add_listener(lambda c: seen.append((c.email.value, c.form_is_valid)))

    controller.on_email_change("a@b")
    controller.on_password_change("longenough")
    await asyncio.sleep(DELAY * 3)

    assert seen[:2] == [("a@b", False), ("a@b", False)]
    assert seen[-1] == ("a@b", True)
    controller.teardown()


@pytest.mark.asyncio
async def test_failing_listener_does_not_break_dispatch(recorder):
    controller = LoginFormController(recorder, delay=DELAY)

    def boom(c):
        raise RuntimeError("listener failure")

    controller.add_listener(boom)
    controller.on_email_change("a@b")

    assert controller.email.value == "a@b"
    controller.teardown()


@pytest.mark.asyncio
async def test_commit_is_published_on_bus(recorder, event_bus):
    received = []

    async def on_validity(payload):
        received.append(payload["form_is_valid"])

    await event_bus.subscribe(events.TOPIC_FORM_VALIDITY, on_validity)
    controller = LoginFormController(recorder, delay=DELAY, event_bus=event_bus)

    controller.on_email_change("a@b")
    controller.on_password_change("longenough")
    await asyncio.sleep(DELAY * 3)
    await event_bus.wait_until_idle()

    assert received == [True]
    controller.teardown()


@pytest.mark.asyncio
async def test_config_drives_delay_and_password_rule(recorder):
    config = FormConfig(debounce_delay_ms=20, password_min_length=3)
    controller = LoginFormController(recorder, config=config)

    assert controller.coordinator.delay == pytest.approx(0.02)

    controller.on_email_change("a@b")
    controller.on_password_change("abc")
    await asyncio.sleep(0.1)

    assert controller.form_is_valid is True
    controller.teardown()
