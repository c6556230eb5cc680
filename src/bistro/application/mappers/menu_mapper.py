from __future__ import annotations

from bistro.application.dto.responses import MenuEntryResponse, MenuItemResponse, MenuResponse
from bistro.domain.menu.entities import MenuItem


def to_menu_item_response(item: MenuItem) -> MenuItemResponse:
    return MenuItemResponse(name=item.name, price=item.price)


def to_menu_response(entries: list[tuple[int, MenuItem]], capacity: int) -> MenuResponse:
    return MenuResponse(
        capacity=capacity,
        items=[
            MenuEntryResponse(position=position, name=item.name, price=item.price)
            for position, item in entries
        ],
    )
