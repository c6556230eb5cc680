from __future__ import annotations

import logging

from opentelemetry import trace

from bistro.application.dto.requests import PlaceOrderRequest
from bistro.application.dto.responses import OrderResponse
from bistro.application.mappers.order_mapper import to_order_response
from bistro.application.metrics.order_lifecycle import record_items_skipped
from bistro.application.ports.repositories import MenuCatalogReader, OrderRepository
from bistro.domain.common.ids import OrderIdSequence
from bistro.domain.order.entities import (
    DEFAULT_PACKAGING_FEE,
    DEFAULT_SERVICE_RATE,
    DineInOrder,
    Order,
    OrderKind,
    PickUpOrder,
    validate_surcharge,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class PlaceOrder:
    """Build an order from item names and hand it to the order repository.

    Names missing from the catalog are skipped and reported back in
    `skippedItems`; they never fail the whole order.
    """

    def __init__(
        self,
        catalog: MenuCatalogReader,
        order_repository: OrderRepository,
        id_sequence: OrderIdSequence,
    ) -> None:
        self._catalog = catalog
        self._order_repository = order_repository
        self._id_sequence = id_sequence

    def execute(self, request: PlaceOrderRequest) -> OrderResponse:
        with tracer.start_as_current_span("place_order") as span:
            order = self._new_order(request)
            span.set_attribute("bistro.order_id", int(order.order_id))

            skipped: list[str] = []
            for name in request.item_names:
                item = self._catalog.find_by_name(name)
                if item is None:
                    logger.warning(
                        "menu_item_not_found",
                        extra={"order_id": order.order_id, "item_name": name},
                    )
                    skipped.append(name)
                    continue
                order.add_item(item)
            record_items_skipped(len(skipped))

            self._order_repository.add_order(order)
            return to_order_response(order, skipped_items=skipped)

    def _new_order(self, request: PlaceOrderRequest) -> Order:
        # surcharge is validated before an id is drawn
        if request.kind == OrderKind.DINE_IN:
            rate = validate_surcharge(
                request.service_rate if request.service_rate is not None else DEFAULT_SERVICE_RATE,
                field="service_rate",
            )
            return DineInOrder(self._id_sequence.next_id(), service_rate=rate)

        fee = validate_surcharge(
            request.packaging_fee if request.packaging_fee is not None else DEFAULT_PACKAGING_FEE,
            field="packaging_fee",
        )
        return PickUpOrder(self._id_sequence.next_id(), packaging_fee=fee)
