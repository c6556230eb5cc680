from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum

from bistro.domain.common.ids import OrderId
from bistro.domain.common.money import (
    format_money,
    format_percent,
    non_negative_amount,
    round_money,
)
from bistro.domain.menu.entities import MenuItem

DEFAULT_SERVICE_RATE = Decimal("0.15")
DEFAULT_PACKAGING_FEE = Decimal("1.50")


class OrderKind(str, Enum):
    DINE_IN = "DINE_IN"
    PICK_UP = "PICK_UP"


class OrderState(str, Enum):
    ACTIVE = "ACTIVE"
    REMOVED = "REMOVED"


class InvalidParameterError(ValueError):
    pass


class OrderRemovedError(Exception):
    pass


def validate_surcharge(value: Decimal | str | int | float, field: str) -> Decimal:
    try:
        return non_negative_amount(value, field=field)
    except ValueError as exc:
        raise InvalidParameterError(str(exc)) from exc


class Order(ABC):
    """A customer's selected items plus a variant-specific surcharge.

    Items are references into the menu catalog. Totals are recomputed from
    the referenced prices on every call.
    """

    def __init__(self, order_id: OrderId) -> None:
        self._order_id = order_id
        self._items: list[MenuItem] = []
        self._state = OrderState.ACTIVE

    @property
    def order_id(self) -> OrderId:
        return self._order_id

    @property
    def state(self) -> OrderState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == OrderState.ACTIVE

    def add_item(self, item: MenuItem) -> None:
        """Append a catalog item reference.

        Callers must pass a real item: check the result of
        `MenuCatalog.find_by_name` before calling. The same item may be
        added any number of times.
        """
        self._ensure_active()
        self._items.append(item)

    def item_count(self) -> int:
        return len(self._items)

    def list_items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items)

    def base_total(self) -> Decimal:
        self._ensure_active()
        return sum((item.price for item in self._items), Decimal("0"))

    @abstractmethod
    def compute_total(self) -> Decimal: ...

    @abstractmethod
    def variant_kind(self) -> OrderKind: ...

    @abstractmethod
    def describe(self) -> str: ...

    @abstractmethod
    def surcharge(self) -> Decimal:
        """The variant parameter: service rate for dine-in, flat fee for pick-up."""

    def rounded_total(self) -> Decimal:
        return round_money(self.compute_total())

    def discard(self) -> None:
        self._ensure_active()
        self._items.clear()
        self._state = OrderState.REMOVED

    def _ensure_active(self) -> None:
        if self._state != OrderState.ACTIVE:
            raise OrderRemovedError(f"order {self._order_id} has been removed")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(order_id={self._order_id}, "
            f"items={len(self._items)}, state={self._state.value})"
        )


class DineInOrder(Order):
    def __init__(
        self,
        order_id: OrderId,
        service_rate: Decimal | str | float = DEFAULT_SERVICE_RATE,
    ) -> None:
        rate = validate_surcharge(service_rate, field="service_rate")
        super().__init__(order_id)
        self._service_rate = rate

    @property
    def service_rate(self) -> Decimal:
        return self._service_rate

    @service_rate.setter
    def service_rate(self, value: Decimal | str | float) -> None:
        self._ensure_active()
        self._service_rate = validate_surcharge(value, field="service_rate")

    def compute_total(self) -> Decimal:
        base = self.base_total()
        return base + base * self._service_rate

    def surcharge(self) -> Decimal:
        return self._service_rate

    def variant_kind(self) -> OrderKind:
        return OrderKind.DINE_IN

    def describe(self) -> str:
        return f"Dine-In (Service: {format_percent(self._service_rate)})"


class PickUpOrder(Order):
    def __init__(
        self,
        order_id: OrderId,
        packaging_fee: Decimal | str | float = DEFAULT_PACKAGING_FEE,
    ) -> None:
        fee = validate_surcharge(packaging_fee, field="packaging_fee")
        super().__init__(order_id)
        self._packaging_fee = fee

    @property
    def packaging_fee(self) -> Decimal:
        return self._packaging_fee

    @packaging_fee.setter
    def packaging_fee(self, value: Decimal | str | float) -> None:
        self._ensure_active()
        self._packaging_fee = validate_surcharge(value, field="packaging_fee")

    def compute_total(self) -> Decimal:
        return self.base_total() + self._packaging_fee

    def surcharge(self) -> Decimal:
        return self._packaging_fee

    def variant_kind(self) -> OrderKind:
        return OrderKind.PICK_UP

    def describe(self) -> str:
        return f"Pickup (Packaging: {format_money(self._packaging_fee)})"
