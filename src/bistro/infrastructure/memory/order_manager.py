from __future__ import annotations

import logging
from types import TracebackType
from typing import TextIO

from bistro.application.metrics.order_lifecycle import (
    record_order_added,
    record_active_orders,
    record_order_removed,
    record_remove_miss,
)
from bistro.application.ports.repositories import DuplicateOrderError
from bistro.cli.rendering import write_orders
from bistro.domain.common.ids import OrderId
from bistro.domain.order.entities import Order, OrderRemovedError

logger = logging.getLogger(__name__)


class OrderManager:
    """Owns the active orders, kept in insertion order.

    Removing an order discards it and shifts later orders down one position.
    Not safe for concurrent use: `add_order` and `remove_order` would need an
    external lock per manager.
    """

    def __init__(self) -> None:
        self._orders: list[Order] = []

    def add_order(self, order: Order) -> OrderId:
        if not order.is_active:
            raise OrderRemovedError(f"order {order.order_id} has been removed")
        if self._index_of(order.order_id) is not None:
            raise DuplicateOrderError(f"order {order.order_id} is already managed")

        self._orders.append(order)
        record_order_added(order, active_count=len(self._orders))
        logger.info(
            "order_added",
            extra={
                "order_id": order.order_id,
                "order_kind": order.variant_kind().value,
                "order_count": len(self._orders),
            },
        )
        return order.order_id

    def remove_order(self, order_id: OrderId) -> bool:
        index = self._index_of(order_id)
        if index is None:
            record_remove_miss()
            logger.info("order_not_found", extra={"order_id": order_id})
            return False

        order = self._orders.pop(index)
        order.discard()
        record_order_removed(order, active_count=len(self._orders))
        logger.info(
            "order_removed",
            extra={
                "order_id": order_id,
                "order_kind": order.variant_kind().value,
                "order_count": len(self._orders),
            },
        )
        return True

    def list_orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def get_order(self, index: int) -> Order | None:
        if 0 <= index < len(self._orders):
            return self._orders[index]
        return None

    def find_order(self, order_id: OrderId) -> Order | None:
        index = self._index_of(order_id)
        return None if index is None else self._orders[index]

    def order_count(self) -> int:
        return len(self._orders)

    def display_all(self, stream: TextIO | None = None) -> None:
        write_orders(self.list_orders(), stream=stream)

    def clear(self) -> None:
        while self._orders:
            order = self._orders.pop()
            order.discard()
        record_active_orders(0)
        logger.debug("orders_cleared")

    def _index_of(self, order_id: OrderId) -> int | None:
        for index, order in enumerate(self._orders):
            if order.order_id == order_id:
                return index
        return None

    def __len__(self) -> int:
        return len(self._orders)

    def __enter__(self) -> OrderManager:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.clear()
