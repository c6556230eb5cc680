from __future__ import annotations

from opentelemetry import trace

from bistro.application.dto.responses import OrderResponse
from bistro.application.mappers.order_mapper import to_order_response
from bistro.application.ports.repositories import OrderRepository

tracer = trace.get_tracer(__name__)


class GetOrder:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self, index: int) -> OrderResponse | None:
        with tracer.start_as_current_span("get_order") as span:
            span.set_attribute("bistro.index", index)
            order = self._order_repository.get_order(index)
            if order is None:
                return None
            return to_order_response(order)
