from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator

from bistro.domain.common.money import non_negative_amount

DEFAULT_CATALOG_CAPACITY = 20


@dataclass(frozen=True)
class MenuItem:
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must be non-empty")
        object.__setattr__(self, "price", non_negative_amount(self.price, field="price"))


class CatalogAlreadyInitializedError(Exception):
    pass


class CatalogCapacityError(ValueError):
    pass


class DuplicateMenuItemError(ValueError):
    pass


class MenuCatalog:
    """Fixed list of purchasable items, populated once and read-only afterwards.

    Orders hold references to the `MenuItem` objects returned by
    `find_by_name`, so every order naming the same dish shares one entry.
    """

    def __init__(self, capacity: int = DEFAULT_CATALOG_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._items: tuple[MenuItem, ...] = ()
        self._initialized = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return self._items

    def initialize(self, entries: Iterable[MenuItem | tuple[str, Decimal | str | float]]) -> None:
        if self._initialized:
            raise CatalogAlreadyInitializedError("catalog is already initialized")

        items: list[MenuItem] = []
        seen: set[str] = set()
        for entry in entries:
            item = entry if isinstance(entry, MenuItem) else MenuItem(name=entry[0], price=entry[1])
            if item.name in seen:
                raise DuplicateMenuItemError(f"duplicate menu item name: {item.name}")
            seen.add(item.name)
            items.append(item)

        if len(items) > self._capacity:
            raise CatalogCapacityError(
                f"catalog holds at most {self._capacity} items, got {len(items)}"
            )

        self._items = tuple(items)
        self._initialized = True

    def find_by_name(self, name: str) -> MenuItem | None:
        for item in self._items:
            if item.name == name:
                return item
        return None

    def list_all(self) -> list[tuple[int, MenuItem]]:
        return list(enumerate(self._items, start=1))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)
