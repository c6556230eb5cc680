from __future__ import annotations

from prometheus_client import Counter, Gauge

from bistro.domain.order.entities import Order

ORDERS_ADDED_TOTAL = Counter(
    "bistro_orders_added_total",
    "Total number of orders taken into the order manager.",
    ["kind"],
)

ORDERS_REMOVED_TOTAL = Counter(
    "bistro_orders_removed_total",
    "Total number of orders removed from the order manager.",
    ["kind"],
)

ORDER_REMOVE_MISSES_TOTAL = Counter(
    "bistro_order_remove_misses_total",
    "Total number of removals that named an unknown order id.",
)

ACTIVE_ORDERS = Gauge(
    "bistro_active_orders",
    "Current number of active orders held by the order manager.",
)

MENU_ITEMS_SKIPPED_TOTAL = Counter(
    "bistro_menu_items_skipped_total",
    "Total number of requested item names missing from the menu catalog.",
)


def record_order_added(order: Order, active_count: int) -> None:
    ORDERS_ADDED_TOTAL.labels(kind=order.variant_kind().value).inc()
    ACTIVE_ORDERS.set(active_count)


def record_order_removed(order: Order, active_count: int) -> None:
    ORDERS_REMOVED_TOTAL.labels(kind=order.variant_kind().value).inc()
    ACTIVE_ORDERS.set(active_count)


def record_active_orders(count: int) -> None:
    ACTIVE_ORDERS.set(count)


def record_remove_miss() -> None:
    ORDER_REMOVE_MISSES_TOTAL.inc()


def record_items_skipped(count: int) -> None:
    if count > 0:
        MENU_ITEMS_SKIPPED_TOTAL.inc(count)
