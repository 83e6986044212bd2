"""
AuthFlow Shared Kernel
======================

Toolkit-independent logic and infrastructure for the AuthFlow application.

Architecture:
- core: EventBus, configuration, cleanup registry
- infrastructure: durable key-value storage
- domain: form validation and session state
"""

__version__ = "0.1.0"

__all__ = []
