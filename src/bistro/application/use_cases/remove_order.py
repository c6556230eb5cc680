from __future__ import annotations

from opentelemetry import trace

from bistro.application.ports.repositories import OrderRepository
from bistro.domain.common.ids import OrderId

tracer = trace.get_tracer(__name__)


class RemoveOrder:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self, order_id: OrderId) -> bool:
        with tracer.start_as_current_span("remove_order") as span:
            span.set_attribute("bistro.order_id", int(order_id))
            removed = self._order_repository.remove_order(order_id)
            span.set_attribute("bistro.removed", removed)
            return removed
