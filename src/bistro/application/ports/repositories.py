from __future__ import annotations

from typing import Protocol

from bistro.domain.common.ids import OrderId
from bistro.domain.menu.entities import MenuItem
from bistro.domain.order.entities import Order


class MenuCatalogReader(Protocol):
    def find_by_name(self, name: str) -> MenuItem | None: ...

    def list_all(self) -> list[tuple[int, MenuItem]]: ...


class OrderRepository(Protocol):
    def add_order(self, order: Order) -> OrderId: ...

    def remove_order(self, order_id: OrderId) -> bool: ...

    def list_orders(self) -> tuple[Order, ...]: ...

    def get_order(self, index: int) -> Order | None: ...

    def find_order(self, order_id: OrderId) -> Order | None: ...

    def order_count(self) -> int: ...


class DuplicateOrderError(Exception):
    pass
