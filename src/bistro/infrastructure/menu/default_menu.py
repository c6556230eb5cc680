from __future__ import annotations

from decimal import Decimal

from bistro.domain.menu.entities import DEFAULT_CATALOG_CAPACITY, MenuCatalog, MenuItem

DEFAULT_MENU: tuple[MenuItem, ...] = (
    MenuItem(name="Burger", price=Decimal("12.99")),
    MenuItem(name="Pizza", price=Decimal("15.50")),
    MenuItem(name="Pasta", price=Decimal("11.25")),
    MenuItem(name="Salad", price=Decimal("8.75")),
    MenuItem(name="Steak", price=Decimal("24.99")),
    MenuItem(name="Chicken Wings", price=Decimal("9.99")),
    MenuItem(name="Fish & Chips", price=Decimal("13.50")),
    MenuItem(name="Tacos", price=Decimal("7.99")),
    MenuItem(name="Soup", price=Decimal("6.50")),
    MenuItem(name="Sandwich", price=Decimal("8.99")),
)


def build_catalog(
    entries: tuple[MenuItem, ...] | list[MenuItem] = DEFAULT_MENU,
    capacity: int = DEFAULT_CATALOG_CAPACITY,
) -> MenuCatalog:
    catalog = MenuCatalog(capacity=capacity)
    catalog.initialize(entries)
    return catalog
