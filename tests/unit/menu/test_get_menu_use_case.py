from __future__ import annotations

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from bistro.application.use_cases.get_menu import GetMenu
from bistro.domain.menu.entities import MenuCatalog
from bistro.infrastructure.menu.default_menu import build_catalog


def test_get_menu_lists_items_with_positions() -> None:
    response = GetMenu(catalog=build_catalog()).execute()

    assert response.capacity == 20
    assert len(response.items) == 10
    assert response.items[0].position == 1
    assert response.items[0].name == "Burger"
    assert response.items[4].name == "Steak"


def test_get_menu_serializes_prices_to_cents() -> None:
    catalog = MenuCatalog(capacity=3)
    catalog.initialize([("Tea", "2.5"), ("Scone", "3")])

    payload = json.loads(GetMenu(catalog=catalog).execute().model_dump_json())

    assert payload["items"] == [
        {"name": "Tea", "price": "2.50", "position": 1},
        {"name": "Scone", "price": "3.00", "position": 2},
    ]


def test_get_menu_on_empty_catalog() -> None:
    response = GetMenu(catalog=MenuCatalog()).execute()

    assert response.items == []
