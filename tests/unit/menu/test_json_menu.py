from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from bistro.infrastructure.menu.json_menu import MenuFileError, load_menu_file, parse_menu_entries


def test_load_menu_file(tmp_path: Path) -> None:
    menu_file = tmp_path / "menu.json"
    menu_file.write_text(
        '[{"name": "Tea", "price": 2.5}, {"name": "Scone", "price": "3.25"}]',
        encoding="utf-8",
    )

    items = load_menu_file(menu_file)

    assert [item.name for item in items] == ["Tea", "Scone"]
    assert items[0].price == Decimal("2.5")
    assert items[1].price == Decimal("3.25")


def test_missing_menu_file(tmp_path: Path) -> None:
    with pytest.raises(MenuFileError):
        load_menu_file(tmp_path / "absent.json")


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "[]",
        '[{"name": "Tea"}]',
        '[{"name": "Tea", "price": -1}]',
        '[{"name": "", "price": 1}]',
        '[{"name": "   ", "price": 1}]',
        '[{"name": "Tea", "price": 1, "spicy": true}]',
    ],
)
def test_invalid_menu_payloads(payload: str) -> None:
    with pytest.raises(MenuFileError):
        parse_menu_entries(payload)
