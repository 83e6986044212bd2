"""Canonical event definitions for AuthFlow."""

from __future__ import annotations

from typing import Literal

from .event_bus import EventPayload

# Event Topics
TOPIC_LOGS_EVENT = "logs.event"

# Session events
TOPIC_AUTH_CHANGED = "auth.changed"

# Form events
TOPIC_FORM_VALIDITY = "form.validity"


def create_logs_event(
    message: str,
    level: Literal["info", "warning", "error", "success"] = "info",
    topic: str | None = None,
) -> EventPayload:
    """Create a Log event."""
    import time

    return {
        "message": message,
        "level": level,
        "topic": topic,
        "ts": time.time(),
    }


def create_auth_changed_event(is_logged_in: bool) -> EventPayload:
    """Create an auth changed event, published after every login and logout."""
    return {
        "is_logged_in": is_logged_in,
    }


def create_form_validity_event(form_is_valid: bool) -> EventPayload:
    """Create a form validity event, published when a debounce window closes."""
    return {
        "form_is_valid": form_is_valid,
    }
