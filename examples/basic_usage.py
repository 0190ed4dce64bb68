"""
Basic usage of event-hub.

Demonstrates how to:
- Subscribe handlers to exact and wildcard patterns
- Limit a subscription to N calls with once() and capacity
- Emit events with and without a bound context
- Unsubscribe and inspect the pattern table

Prerequisites:
    pip install event-hub
"""

import logging

from event_hub import EventHub


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    hub = EventHub()

    # -- Subscribe ------------------------------------------------------------
    def on_order_paid(order_id: int, amount: float) -> None:
        print(f"order {order_id} paid: {amount:.2f}")

    def audit(*args) -> None:
        print(f"audit: {args}")

    hub.on("order.paid", on_order_paid)
    # "*" stands for exactly one segment: order.<anything>
    hub.on("order.*", audit)
    # Fires on the first shipment only, then removes itself
    hub.once("order.shipped", lambda order_id: print(f"first shipment: {order_id}"))
    # At most three reminders
    hub.on("order.*.reminder", lambda: print("reminder sent"), 3)

    # -- Emit -----------------------------------------------------------------
    hub.emit("order.paid", 42, 19.9)
    hub.emit("order.shipped", 42)
    hub.emit("order.shipped", 43)  # once-handler is gone, only audit runs
    for _ in range(4):
        hub.emit("order.42.reminder")

    # Handlers receive the context as their first argument
    class Cart:
        total = 0

    def add_item(cart: Cart, price: int) -> None:
        cart.total += price

    cart = Cart()
    hub.on("cart.add", add_item)
    hub.emit_with_context("cart.add", cart, 5)
    hub.emit_with_context("cart.add", cart, 7)
    print(f"cart total: {cart.total}")

    # -- Inspect and unsubscribe ---------------------------------------------
    print(hub.patterns())
    hub.dump_state(forced=True)

    hub.off("order.*", audit)
    hub.off("cart.add")
    hub.stop_logging()
    hub.emit("cart.add", 1)  # no subscribers left, warning suppressed


if __name__ == "__main__":
    main()
