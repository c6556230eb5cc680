from __future__ import annotations

from opentelemetry import trace

from bistro.application.dto.responses import OrderListResponse
from bistro.application.mappers.order_mapper import to_order_list_response
from bistro.application.ports.repositories import OrderRepository

tracer = trace.get_tracer(__name__)


class ListOrders:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self) -> OrderListResponse:
        with tracer.start_as_current_span("list_orders"):
            return to_order_list_response(self._order_repository.list_orders())
