from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

from bistro.domain.common.money import round_money

Amount = Annotated[
    Decimal,
    PlainSerializer(lambda value: f"{round_money(value)}", return_type=str, when_used="json"),
]


class MenuItemResponse(BaseModel):
    name: str
    price: Amount


class MenuEntryResponse(MenuItemResponse):
    position: int


class MenuResponse(BaseModel):
    capacity: int
    items: list[MenuEntryResponse] = Field(default_factory=list)


class OrderResponse(BaseModel):
    orderId: int
    kind: str
    label: str
    state: str
    items: list[MenuItemResponse] = Field(default_factory=list)
    baseTotal: Amount
    total: Amount
    serviceRate: Decimal | None = None
    packagingFee: Amount | None = None
    skippedItems: list[str] = Field(default_factory=list)


class OrderListResponse(BaseModel):
    orders: list[OrderResponse] = Field(default_factory=list)
    count: int = 0
