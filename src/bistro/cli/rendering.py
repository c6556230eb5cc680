from __future__ import annotations

import sys
from typing import Iterable, TextIO

from bistro.domain.common.money import format_money
from bistro.domain.menu.entities import MenuItem
from bistro.domain.order.entities import Order

ORDER_SEPARATOR = "-" * 24


def render_menu(entries: Iterable[tuple[int, MenuItem]]) -> str:
    lines = ["=== MENU ==="]
    lines.extend(
        f"{position}. {item.name} - {format_money(item.price)}" for position, item in entries
    )
    lines.append("=" * 12)
    return "\n".join(lines)


def render_order(order: Order) -> str:
    lines = [f"Order #{order.order_id} items:"]
    lines.extend(f"  - {item.name} ({format_money(item.price)})" for item in order.list_items())
    lines.append(f"Total: {format_money(order.compute_total())}")
    lines.append(f"Type: {order.describe()}")
    lines.append(ORDER_SEPARATOR)
    return "\n".join(lines)


def render_orders(orders: Iterable[Order]) -> str:
    orders = list(orders)
    if not orders:
        return "No orders in system."
    return "\n".join(["", "=== ALL ORDERS ===", *(render_order(order) for order in orders)])


def write_orders(orders: Iterable[Order], stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(render_orders(orders) + "\n")
