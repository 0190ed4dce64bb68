"""
Event Hub — Registry
Pattern table, registration, emission and unregistration.

Handlers run synchronously inside emit(). Bounded subscriptions count down
after each invocation and drop out of the table as soon as they reach zero;
a pattern entry disappears together with its last subscription.
"""

from __future__ import annotations

import json
from typing import Any

from . import matcher
from .errors import InvalidCapacityError
from .logsink import LogSink
from .models import Handler, PatternEntry, Subscription, SubscriptionInfo, handler_name


class EventHub:
    """In-process publish/subscribe registry with wildcard patterns."""

    def __init__(self, sink: LogSink | None = None) -> None:
        self._sink = sink or LogSink()
        # pattern -> subscriptions, both in insertion order
        self._table: dict[str, list[Subscription]] = {}

    @property
    def sink(self) -> LogSink:
        return self._sink

    # ── Registration ─────────────────────────────────────────────────────────

    def _register(self, pattern: str, handler: Handler, capacity: int | None) -> None:
        if capacity is not None and (isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1):
            raise InvalidCapacityError(capacity)
        # Fail before touching the table
        matcher.compile_pattern(pattern)

        subs = self._table.setdefault(pattern, [])
        for sub in subs:
            if sub.handler is handler:
                self._sink.warn(
                    "Handler %s is already registered under %r; only its capacity was updated",
                    handler_name(handler),
                    pattern,
                )
                sub.remaining = capacity
                return
        subs.append(Subscription(pattern, handler, capacity))

    def on(self, pattern: str, handler: Handler, capacity: int | None = None) -> None:
        """Subscribe ``handler`` to ``pattern``, for ``capacity`` calls or forever."""
        self._register(pattern, handler, capacity)

    def once(self, pattern: str, handler: Handler) -> None:
        """Subscribe ``handler`` for a single call."""
        self._register(pattern, handler, 1)

    # ── Unregistration ───────────────────────────────────────────────────────

    def off(self, pattern: str, handler: Handler | None = None) -> None:
        """
        Unsubscribe by exact pattern.

        With ``handler``, removes that handler only. Without it, removes every
        subscription under ``pattern``. Wildcards are not expanded: a handler
        registered under ``evt.*`` is removed with ``off("evt.*")``.
        """
        subs = matcher.resolve_for_exact(self._table, pattern)
        if subs is None:
            self._sink.warn("Event %r has no matched subscriptions", pattern)
            return

        if handler is None:
            del self._table[pattern]
            for sub in subs:
                sub.active = False
            return

        for sub in subs:
            if sub.handler is handler:
                self._remove(sub, subs)
                break

    def clear(self) -> None:
        """Remove every subscription."""
        for subs in self._table.values():
            for sub in subs:
                sub.active = False
        self._table.clear()

    def _remove(self, sub: Subscription, subs: list[Subscription]) -> None:
        subs.remove(sub)
        sub.active = False
        # The entry may already have been replaced by a re-entrant off()/on()
        if not subs and self._table.get(sub.pattern) is subs:
            del self._table[sub.pattern]

    # ── Emission ─────────────────────────────────────────────────────────────

    def emit(self, event_name: str, *args: Any, **kwargs: Any) -> None:
        """Call every handler whose pattern matches ``event_name``."""
        self._dispatch(event_name, None, args, kwargs)

    def emit_with_context(self, event_name: str, context: Any, *args: Any, **kwargs: Any) -> None:
        """Like emit(), passing ``context`` to each handler as its first argument."""
        self._dispatch(event_name, context, args, kwargs)

    def _dispatch(self, event_name: str, context: Any, args: tuple, kwargs: dict) -> None:
        matched = matcher.resolve_for_emit(self._table, event_name)
        if not matched:
            self._sink.warn("Event %r has no matched subscriptions", event_name)
            return

        if context is not None:
            args = (context, *args)

        for subs in matched:
            for sub in list(subs):
                # Removed earlier in this emission or by a nested call
                if not sub.active:
                    continue
                sub.handler(*args, **kwargs)
                if sub.consume() and sub.active:
                    self._remove(sub, subs)

    # ── Introspection ────────────────────────────────────────────────────────

    def has(self, pattern: str) -> bool:
        return pattern in self._table

    def patterns(self) -> list[str]:
        return list(self._table)

    def matching_patterns(self, event_name: str) -> list[str]:
        """Patterns an emit of ``event_name`` would reach, in table order."""
        return matcher.matching_patterns(list(self._table), event_name)

    def listener_count(self, pattern: str | None = None) -> int:
        if pattern is not None:
            return len(self._table.get(pattern, ()))
        return sum(len(subs) for subs in self._table.values())

    def snapshot(self) -> list[PatternEntry]:
        return [
            PatternEntry(
                pattern=pattern,
                wildcard=matcher.is_wildcard(pattern),
                subscriptions=[SubscriptionInfo.from_subscription(s) for s in subs],
            )
            for pattern, subs in self._table.items()
        ]

    def __contains__(self, pattern: object) -> bool:
        return isinstance(pattern, str) and self.has(pattern)

    def __len__(self) -> int:
        return self.listener_count()

    # ── Logging ──────────────────────────────────────────────────────────────

    def start_logging(self) -> None:
        self._sink.enabled = True

    def stop_logging(self) -> None:
        self._sink.enabled = False

    def dump_state(self, forced: bool = False) -> str:
        """Write the pattern table as JSON to the log and return it.

        With ``forced`` the dump is written even while logging is stopped.
        """
        rendered = json.dumps([entry.model_dump() for entry in self.snapshot()], indent=2)
        if forced:
            self._sink.force("All event subscriptions:\n%s", rendered)
        else:
            self._sink.log("All event subscriptions:\n%s", rendered)
        return rendered

    def __repr__(self) -> str:
        return f"<EventHub patterns={len(self._table)} subscriptions={self.listener_count()}>"
