"""
Shared Core Module
==================

Event system, configuration and cleanup registry.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

from .service_registry import register_cleanup_handler, run_cleanup_handlers

# Configuration
from .configuration import (
    AuthConfig,
    ConfigManager,
    FormConfig,
    SystemConfig,
    UIConfig,
    get_config_manager,
    get_config,
    ValidationLevel,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Service Registry
    "register_cleanup_handler",
    "run_cleanup_handlers",
    # Configuration
    "AuthConfig",
    "ConfigManager",
    "FormConfig",
    "SystemConfig",
    "UIConfig",
    "get_config_manager",
    "get_config",
    "ValidationLevel",
]
