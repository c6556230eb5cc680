from __future__ import annotations

from bistro.application.dto.responses import OrderListResponse, OrderResponse
from bistro.application.mappers.menu_mapper import to_menu_item_response
from bistro.domain.common.money import round_money
from bistro.domain.order.entities import Order, OrderKind


def to_order_response(order: Order, skipped_items: list[str] | None = None) -> OrderResponse:
    kind = order.variant_kind()
    return OrderResponse(
        orderId=int(order.order_id),
        kind=kind.value,
        label=order.describe(),
        state=order.state.value,
        items=[to_menu_item_response(item) for item in order.list_items()],
        baseTotal=round_money(order.base_total()),
        total=order.rounded_total(),
        serviceRate=order.surcharge() if kind == OrderKind.DINE_IN else None,
        packagingFee=order.surcharge() if kind == OrderKind.PICK_UP else None,
        skippedItems=list(skipped_items or []),
    )


def to_order_list_response(orders: tuple[Order, ...]) -> OrderListResponse:
    return OrderListResponse(
        orders=[to_order_response(order) for order in orders],
        count=len(orders),
    )
