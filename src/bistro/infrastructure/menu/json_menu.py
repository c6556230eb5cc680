from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from bistro.domain.menu.entities import MenuItem


class MenuFileError(Exception):
    pass


class MenuFileEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0, decimal_places=2)


_ENTRIES = TypeAdapter(list[MenuFileEntry])


def parse_menu_entries(payload: str | bytes) -> list[MenuItem]:
    try:
        entries = _ENTRIES.validate_json(payload)
    except ValidationError as exc:
        raise MenuFileError(f"invalid menu payload: {exc.error_count()} error(s)") from exc
    if not entries:
        raise MenuFileError("menu must contain at least one item")
    try:
        return [MenuItem(name=entry.name, price=entry.price) for entry in entries]
    except ValueError as exc:
        raise MenuFileError(str(exc)) from exc


def load_menu_file(path: str | Path) -> list[MenuItem]:
    menu_path = Path(path)
    try:
        payload = menu_path.read_bytes()
    except OSError as exc:
        raise MenuFileError(f"cannot read menu file {menu_path}: {exc.strerror}") from exc
    return parse_menu_entries(payload)
