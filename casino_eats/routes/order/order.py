from datetime import date
from typing import Optional
from fastapi import APIRouter, Query, status
from fastapi.responses import PlainTextResponse

from casino_eats.cache.orders import OrderCacheManager
from casino_eats.helpers.order.formatters import format_currency, format_order_date
from casino_eats.helpers.order.status_flow import available_transitions, is_terminal, next_status
from casino_eats.schemas.order.order import (
    OrderCreate,
    OrderRead,
    OrderViewRead,
    StatusOptionsRead,
    StatusUpdateRequest,
)

CARD_WIDTH = 32


def render_order_card(order: OrderRead) -> str:
    lines = []
    lines.append("=" * CARD_WIDTH)
    lines.append(f"{'MESA ' + str(order.table_number):^{CARD_WIDTH}}")
    lines.append("=" * CARD_WIDTH)
    lines.append(f"Fecha: {format_order_date(order.submitted_at)}")
    lines.append(f"Estado: {order.status.value}")
    lines.append("-" * CARD_WIDTH)

    for item in order.line_items:
        label = f"{item.quantity}x {item.name}"[: CARD_WIDTH - 12]
        amount = format_currency(item.subtotal)
        lines.append(f"{label}{amount:>{CARD_WIDTH - len(label)}}")

    lines.append("-" * CARD_WIDTH)
    total = format_currency(order.total_amount)
    lines.append(f"TOTAL{total:>{CARD_WIDTH - 5}}")

    if order.note:
        lines.append(f"Nota: {order.note}")
    if order.delivered_at:
        lines.append(f"Entregado: {format_order_date(order.delivered_at)}")

    lines.append("=" * CARD_WIDTH)
    return "\n".join(lines)


class OrderRouter(APIRouter):
    def __init__(self, orders: OrderCacheManager, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.orders = orders

        self.add_api_route("/orders/", self.get_orders_view, methods=["GET"], response_model=OrderViewRead)
        self.add_api_route("/orders/", self.create_order, methods=["POST"], response_model=OrderRead, status_code=status.HTTP_201_CREATED)
        self.add_api_route("/orders/refresh", self.refresh_orders, methods=["POST"], response_model=OrderViewRead)
        self.add_api_route("/orders/{order_id}", self.get_order_by_id, methods=["GET"], response_model=OrderRead)
        self.add_api_route("/orders/{order_id}/status", self.update_order_status_by_id, methods=["PATCH"], response_model=OrderRead)
        self.add_api_route("/orders/{order_id}/transitions", self.get_order_transitions, methods=["GET"], response_model=StatusOptionsRead)
        self.add_api_route("/orders/{order_id}/card", self.print_order_card, methods=["GET"], response_class=PlainTextResponse)

    async def get_orders_view(
        self,
        date_from: Optional[date] = Query(default=None),
        date_to: Optional[date] = Query(default=None),
    ):
        return await self.orders.load_view(date_from, date_to)

    async def refresh_orders(self):
        return await self.orders.refresh()

    async def create_order(self, order_request: OrderCreate):
        return await self.orders.submit_order(order_request)

    async def get_order_by_id(self, order_id: str):
        return await self.orders.get_order(order_id)

    async def update_order_status_by_id(self, order_id: str, status_data: StatusUpdateRequest):
        return await self.orders.update_order_status(order_id, status_data.status)

    async def get_order_transitions(self, order_id: str):
        order = await self.orders.get_order(order_id)
        return StatusOptionsRead(
            current=order.status,
            next=next_status(order.status),
            options=available_transitions(order.status, strict=self.orders.strict_transitions),
            is_terminal=is_terminal(order.status),
        )

    async def print_order_card(self, order_id: str):
        order = await self.orders.get_order(order_id)
        return PlainTextResponse(render_order_card(order))
