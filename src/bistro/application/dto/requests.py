from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bistro.domain.order.entities import OrderKind


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class PlaceOrderRequest(CamelBaseModel):
    kind: OrderKind
    item_names: list[str] = Field(default_factory=list)
    service_rate: Decimal | None = None
    packaging_fee: Decimal | None = None

    @model_validator(mode="after")
    def check_surcharge_matches_kind(self) -> PlaceOrderRequest:
        if self.kind == OrderKind.DINE_IN and self.packaging_fee is not None:
            raise ValueError("packaging_fee applies to PICK_UP orders only")
        if self.kind == OrderKind.PICK_UP and self.service_rate is not None:
            raise ValueError("service_rate applies to DINE_IN orders only")
        return self
