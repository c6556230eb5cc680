from __future__ import annotations

from decimal import Decimal
from typing import TextIO

from opentelemetry import trace

from bistro.application.dto.requests import PlaceOrderRequest
from bistro.application.use_cases.place_order import PlaceOrder
from bistro.application.use_cases.remove_order import RemoveOrder
from bistro.cli.rendering import render_menu
from bistro.domain.common.ids import OrderId, OrderIdSequence
from bistro.domain.common.money import format_money
from bistro.domain.menu.entities import MenuCatalog
from bistro.domain.order.entities import OrderKind
from bistro.infrastructure.memory.order_manager import OrderManager

tracer = trace.get_tracer(__name__)

DEMO_ORDERS: tuple[tuple[str, PlaceOrderRequest], ...] = (
    (
        "Creating Dine-In Order:",
        PlaceOrderRequest(
            kind=OrderKind.DINE_IN,
            item_names=["Burger", "Pizza", "Steak"],
            service_rate=Decimal("0.18"),
        ),
    ),
    (
        "Creating Pickup Order:",
        PlaceOrderRequest(
            kind=OrderKind.PICK_UP,
            item_names=["Pasta", "Salad"],
            packaging_fee=Decimal("2.00"),
        ),
    ),
    (
        "Creating Another Dine-In Order:",
        PlaceOrderRequest(
            kind=OrderKind.DINE_IN,
            item_names=["Chicken Wings", "Tacos", "Soup"],
            service_rate=Decimal("0.20"),
        ),
    ),
)
DEMO_REMOVED_ORDER = OrderId(2)


def run_demo(
    catalog: MenuCatalog,
    manager: OrderManager,
    id_sequence: OrderIdSequence,
    out: TextIO,
) -> None:
    place_order = PlaceOrder(catalog=catalog, order_repository=manager, id_sequence=id_sequence)
    remove_order = RemoveOrder(order_repository=manager)

    with tracer.start_as_current_span("demo"):
        out.write("=== RESTAURANT ORDER MANAGEMENT SYSTEM DEMO ===\n")
        out.write("\n" + render_menu(catalog.list_all()) + "\n")

        for heading, request in DEMO_ORDERS:
            out.write(f"\n{heading}\n")
            response = place_order.execute(request)
            for name in response.skippedItems:
                out.write(f"Menu item '{name}' not found, skipped.\n")
            out.write(f"Order added successfully. Order ID: {response.orderId}\n")

        manager.display_all(out)

        out.write("\n=== POLYMORPHIC DISPATCH DEMO ===\n")
        out.write("Order totals calculated polymorphically:\n")
        for index in range(manager.order_count()):
            order = manager.get_order(index)
            if order is not None:
                out.write(f"Order {order.order_id} total: {format_money(order.compute_total())}\n")

        out.write(f"\nRemoving Order ID {DEMO_REMOVED_ORDER}:\n")
        if remove_order.execute(DEMO_REMOVED_ORDER):
            out.write(f"Order ID {DEMO_REMOVED_ORDER} removed successfully.\n")
        else:
            out.write(f"Order ID {DEMO_REMOVED_ORDER} not found.\n")

        out.write("\nRemaining orders after removal:\n")
        manager.display_all(out)
