import pytest

from authflow.shared.core.event_bus import EventBus
from authflow.shared.core import service_registry


@pytest.mark.asyncio
async def test_publish_reaches_all_subscribers():
    bus = EventBus()
    seen = []

    async def first(payload):
        seen.append(("first", payload["n"]))

    async def second(payload):
        seen.append(("second", payload["n"]))

    await bus.subscribe("topic", first)
    await bus.subscribe("topic", second)
    await bus.subscribe("topic", first)
    await bus.publish("topic", {"n": 1})
    await bus.wait_until_idle()

    assert sorted(seen) == [("first", 1), ("second", 1)]


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    seen = []

    async def broken(payload):
        raise RuntimeError("boom")

    async def healthy(payload):
        seen.append(payload)

    await bus.subscribe("topic", broken)
    await bus.subscribe("topic", healthy)
    await bus.publish("topic", {"ok": True})
    await bus.wait_until_idle()

    assert seen == [{"ok": True}]


@pytest.mark.asyncio
async def test_unsubscribe_and_publish_nowait():
    bus = EventBus()
    seen = []

    async def handler(payload):
        seen.append(payload)

    await bus.subscribe("topic", handler)
    bus.publish_nowait("topic", {"n": 1})
    await bus.wait_until_idle()
    await bus.unsubscribe("topic", handler)
    bus.publish_nowait("topic", {"n": 2})
    await bus.wait_until_idle()

    assert seen == [{"n": 1}]


def test_cleanup_handlers_run_once_and_survive_failures():
    calls = []

    def broken():
        raise RuntimeError("boom")

    service_registry.register_cleanup_handler(lambda: calls.append("a"))
    service_registry.register_cleanup_handler(broken)
    service_registry.register_cleanup_handler(lambda: calls.append("b"))

    service_registry.run_cleanup_handlers()
    service_registry.run_cleanup_handlers()

    assert calls == ["a", "b"]
