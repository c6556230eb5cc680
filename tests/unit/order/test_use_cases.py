from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from bistro.application.use_cases import get_order as get_order_module
from bistro.application.use_cases.get_order import GetOrder
from bistro.application.use_cases.list_orders import ListOrders
from bistro.application.use_cases.remove_order import RemoveOrder
from bistro.domain.common.ids import OrderId
from bistro.domain.menu.entities import MenuItem
from bistro.domain.order.entities import DineInOrder, PickUpOrder
from bistro.infrastructure.memory.order_manager import OrderManager


def _seeded_manager() -> OrderManager:
    manager = OrderManager()
    dine_in = DineInOrder(OrderId(1), service_rate="0.18")
    dine_in.add_item(MenuItem(name="Burger", price=Decimal("12.99")))
    pick_up = PickUpOrder(OrderId(2), packaging_fee="2.00")
    pick_up.add_item(MenuItem(name="Pasta", price=Decimal("11.25")))
    manager.add_order(dine_in)
    manager.add_order(pick_up)
    return manager


def test_list_orders_returns_every_active_order() -> None:
    response = ListOrders(order_repository=_seeded_manager()).execute()

    assert response.count == 2
    assert [order.orderId for order in response.orders] == [1, 2]
    assert [order.kind for order in response.orders] == ["DINE_IN", "PICK_UP"]
    assert response.orders[0].total == Decimal("15.33")
    assert response.orders[1].total == Decimal("13.25")
    assert all(order.state == "ACTIVE" for order in response.orders)


def test_remove_order_reports_outcome() -> None:
    manager = _seeded_manager()
    remove_order = RemoveOrder(order_repository=manager)

    assert remove_order.execute(OrderId(1)) is True
    assert remove_order.execute(OrderId(1)) is False
    assert [order.order_id for order in manager.list_orders()] == [2]


def test_get_order_by_position() -> None:
    get_order = GetOrder(order_repository=_seeded_manager())

    response = get_order.execute(1)

    assert response is not None
    assert response.orderId == 2
    assert response.label == "Pickup (Packaging: $2.00)"
    assert get_order.execute(2) is None
    assert get_order.execute(-1) is None


def test_get_order_runs_inside_a_span(monkeypatch: pytest.MonkeyPatch) -> None:
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(get_order_module, "tracer", provider.get_tracer("test"))

    GetOrder(order_repository=_seeded_manager()).execute(0)

    spans = exporter.get_finished_spans()
    assert [span.name for span in spans] == ["get_order"]
    assert spans[0].attributes["bistro.index"] == 0
