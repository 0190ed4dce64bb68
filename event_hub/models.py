"""
Event Hub — Data model
Subscription records kept in the pattern table, plus pydantic schemas
for read-only snapshots of the table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import BaseModel, Field

Handler = Callable[..., Any]


@dataclass(eq=False)
class Subscription:
    """One handler registered under one pattern.

    Compared by identity: two records are never equal unless they are the
    same object. ``remaining`` is ``None`` for unbounded subscriptions.
    """

    pattern: str
    handler: Handler
    remaining: int | None = None
    active: bool = field(default=True, repr=False)

    def consume(self) -> bool:
        """Count one invocation. Returns True when the subscription is exhausted."""
        if self.remaining is None:
            return False
        self.remaining -= 1
        return self.remaining <= 0


def handler_name(handler: Handler) -> str:
    """Readable name for a handler, used in snapshots and log messages."""
    name = getattr(handler, "__qualname__", None) or getattr(handler, "__name__", None)
    if name is None:
        return repr(handler)
    module = getattr(handler, "__module__", None)
    return f"{module}.{name}" if module else name


class SubscriptionInfo(BaseModel):
    pattern: str
    handler: str
    remaining: int | None = Field(None, description="None=unbounded")

    @classmethod
    def from_subscription(cls, sub: Subscription) -> SubscriptionInfo:
        return cls(pattern=sub.pattern, handler=handler_name(sub.handler), remaining=sub.remaining)


class PatternEntry(BaseModel):
    pattern: str
    wildcard: bool = False
    subscriptions: list[SubscriptionInfo] = Field(default_factory=list)
