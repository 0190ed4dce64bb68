"""
Event Hub — Default hub
Module-level dispatcher shared by code that does not carry its own EventHub.
"""

from __future__ import annotations

from typing import Any

from .hub import EventHub
from .models import Handler

default_hub = EventHub()


def get_default_hub() -> EventHub:
    return default_hub


def on(pattern: str, handler: Handler, capacity: int | None = None) -> None:
    """Register a handler on the default hub."""
    default_hub.on(pattern, handler, capacity)


def once(pattern: str, handler: Handler) -> None:
    """Register a single-use handler on the default hub."""
    default_hub.once(pattern, handler)


def off(pattern: str, handler: Handler | None = None) -> None:
    """Unregister from the default hub by exact pattern."""
    default_hub.off(pattern, handler)


def emit(event: str, *args: Any, **kwargs: Any) -> None:
    """Emit an event to all matching handlers on the default hub."""
    default_hub.emit(event, *args, **kwargs)


def emit_with_context(event: str, context: Any, *args: Any, **kwargs: Any) -> None:
    default_hub.emit_with_context(event, context, *args, **kwargs)


def clear() -> None:
    """Remove all handlers (for testing)."""
    default_hub.clear()
