"""
Event Hub — Emission tests
Invocation order, capacity countdown, re-entrancy and handler errors.
"""

import logging
from unittest.mock import MagicMock

import pytest

# ── Delivery ──────────────────────────────────────────────────────────────────


class TestDelivery:
    def test_args_and_kwargs_forwarded(self, hub):
        handler = MagicMock()
        hub.on("user.saved", handler)
        hub.emit("user.saved", 1, "two", key="value")
        handler.assert_called_once_with(1, "two", key="value")

    def test_wildcard_segment(self, hub):
        handler = MagicMock()
        hub.on("a.*.b", handler)
        hub.emit("a.mid.b")
        hub.emit("a.b")
        assert handler.call_count == 1

    def test_all_matching_collections_in_registration_order(self, hub):
        order = []
        hub.on("job.*", lambda: order.append("job.*"))
        hub.on("job.done", lambda: order.append("job.done"))
        hub.on("other", lambda: order.append("other"))
        hub.on("job.*.x", lambda: order.append("job.*.x"))
        hub.on("*.done", lambda: order.append("*.done"))
        hub.on("job.*", lambda: order.append("job.* #2"))
        hub.emit("job.done")
        assert order == ["job.*", "job.* #2", "job.done"]

    def test_wildcard_key_emitted_verbatim(self, hub):
        handler = MagicMock()
        hub.on("a+.*", handler)
        hub.emit("a+.*")
        handler.assert_called_once_with()
        assert hub.matching_patterns("a+.*") == ["a+.*"]

    def test_each_subscriber_called_once_per_emit(self, hub):
        handler = MagicMock()
        hub.on("a.*", handler)
        hub.on("a.b", handler)
        hub.on("a.b", MagicMock())
        hub.emit("a.b")
        # Same handler under two patterns is two subscriptions
        assert handler.call_count == 2

    def test_unmatched_emit_warns_and_returns(self, hub, caplog):
        with caplog.at_level(logging.WARNING, logger="event_hub.tests"):
            hub.emit("nobody.listens", 1)
        assert any("no matched subscriptions" in r.getMessage() for r in caplog.records)

    def test_context_passed_first(self, hub):
        handler = MagicMock()
        ctx = object()
        hub.on("x", handler)
        hub.emit_with_context("x", ctx, 1, flag=True)
        handler.assert_called_once_with(ctx, 1, flag=True)

    def test_context_binds_like_a_method(self, hub):
        class Counter:
            def __init__(self):
                self.total = 0

        def add(self, n):
            self.total += n

        counter = Counter()
        hub.on("add", add)
        hub.emit_with_context("add", counter, 3)
        hub.emit_with_context("add", counter, 4)
        assert counter.total == 7

    def test_none_context_is_unbound(self, hub):
        handler = MagicMock()
        hub.on("x", handler)
        hub.emit_with_context("x", None, 1)
        handler.assert_called_once_with(1)


# ── Capacity ──────────────────────────────────────────────────────────────────


class TestCapacity:
    def test_once_fires_once_and_prunes(self, hub):
        handler = MagicMock()
        hub.once("x", handler)
        hub.emit("x")
        assert not hub.has("x")
        hub.emit("x")
        assert handler.call_count == 1

    def test_capacity_two(self, hub):
        handler = MagicMock()
        hub.on("x", handler, 2)
        hub.emit("x")
        hub.emit("x")
        assert handler.call_count == 2
        assert not hub.has("x")
        hub.emit("x")
        assert handler.call_count == 2

    def test_capacity_counts_down(self, hub):
        hub.on("x", MagicMock(), 3)
        hub.emit("x")
        assert hub.snapshot()[0].subscriptions[0].remaining == 2

    def test_prune_keeps_other_subscribers(self, hub):
        keep = MagicMock()
        hub.once("x", MagicMock())
        hub.on("x", keep)
        hub.emit("x")
        hub.emit("x")
        assert keep.call_count == 2
        assert hub.listener_count("x") == 1

    def test_exhausted_in_one_collection_not_seen_by_later_collection(self, hub):
        # Same handler under two patterns are independent subscriptions
        handler = MagicMock()
        hub.once("a.*", handler)
        hub.once("a.b", handler)
        hub.emit("a.b")
        assert handler.call_count == 2
        assert hub.patterns() == []

    def test_unbounded_never_pruned(self, hub):
        handler = MagicMock()
        hub.on("x", handler)
        for _ in range(5):
            hub.emit("x")
        assert handler.call_count == 5
        assert hub.has("x")


# ── Re-entrancy ───────────────────────────────────────────────────────────────


class TestReentrancy:
    def test_handler_removing_sibling_skips_it(self, hub):
        second = MagicMock()

        def first():
            hub.off("x", second)

        hub.on("x", first)
        hub.on("x", second)
        hub.emit("x")
        second.assert_not_called()

    def test_handler_removing_itself_does_not_skip_sibling(self, hub):
        second = MagicMock()

        def first():
            hub.off("x", first)

        hub.on("x", first)
        hub.on("x", second)
        hub.emit("x")
        second.assert_called_once()
        assert hub.listener_count("x") == 1

    def test_handler_added_during_emit_runs_next_time(self, hub):
        late = MagicMock()

        def first():
            hub.on("x", late)

        hub.on("x", first)
        hub.emit("x")
        late.assert_not_called()
        hub.emit("x")
        late.assert_called_once()

    def test_nested_emit_observes_pruning(self, hub):
        calls = []

        def once_handler():
            calls.append("once")

        def relay():
            calls.append("relay")
            hub.emit("target")

        hub.once("target", once_handler)
        hub.on("outer", relay)
        hub.emit("target")
        hub.emit("outer")
        assert calls == ["once", "relay"]

    def test_off_all_during_emit_stops_remaining(self, hub):
        later = MagicMock()

        def first():
            hub.off("x")

        hub.on("x", first)
        hub.on("x", later)
        hub.emit("x")
        later.assert_not_called()
        assert not hub.has("x")

    def test_pruning_does_not_delete_replacement_entry(self, hub):
        fresh = MagicMock()

        def first():
            hub.off("x")
            hub.on("x", fresh)

        hub.once("x", first)
        hub.emit("x")
        assert hub.has("x")
        hub.emit("x")
        fresh.assert_called_once()


# ── Handler errors ────────────────────────────────────────────────────────────


class TestHandlerErrors:
    def test_exception_propagates_and_stops_emission(self, hub):
        later = MagicMock()

        def bad():
            raise RuntimeError("boom")

        hub.on("x", bad)
        hub.on("x", later)
        with pytest.raises(RuntimeError, match="boom"):
            hub.emit("x")
        later.assert_not_called()

    def test_failing_bounded_handler_keeps_capacity(self, hub):
        def bad():
            raise RuntimeError("boom")

        hub.once("x", bad)
        with pytest.raises(RuntimeError):
            hub.emit("x")
        assert hub.snapshot()[0].subscriptions[0].remaining == 1
