"""
Event Hub — Exceptions
Typed errors raised by the registry. "Nothing matched" conditions are
warnings, never exceptions.
"""

from __future__ import annotations

from typing import Any


class EventHubError(Exception):
    """Base error class for event-hub."""

    def __init__(self, message: str, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidPatternError(EventHubError, ValueError):
    """Pattern cannot be compiled into a matching expression."""

    def __init__(self, pattern: str, detail: Any = None):
        super().__init__(f"Invalid event pattern {pattern!r}", detail)
        self.pattern = pattern


class InvalidCapacityError(EventHubError, ValueError):
    """Capacity is not a positive integer."""

    def __init__(self, capacity: Any):
        super().__init__(f"Capacity must be a positive integer or None, got {capacity!r}", capacity)
        self.capacity = capacity
