from datetime import datetime, timezone
import logging
from typing import Any, Dict, List, Optional
from sqlmodel import Session, select

from casino_eats.core.exceptions.errors import OrderNotFoundError
from casino_eats.database.connection import engine as default_engine
from casino_eats.enums.order_status import OrderStatus
from casino_eats.models.order.order import Order
from casino_eats.schemas.cart.cart_item import LineItem
from casino_eats.schemas.order.order import OrderRead
from casino_eats.utils.dates import as_utc


class OrderStore:
    """Acceso a la tabla pedidos_casino. Llamadas bloqueantes."""

    def __init__(self, engine=None):
        self.engine = engine or default_engine

    def fetch(self, submitted_from: Optional[datetime] = None, submitted_to: Optional[datetime] = None) -> List[OrderRead]:
        with Session(self.engine) as session:
            stmt = select(Order)
            if submitted_from is not None:
                stmt = stmt.where(Order.submitted_at >= as_utc(submitted_from))
            if submitted_to is not None:
                stmt = stmt.where(Order.submitted_at <= as_utc(submitted_to))
            stmt = stmt.order_by(Order.submitted_at.desc())

            orders = session.exec(stmt).all()
            return [OrderRead.model_validate(order) for order in orders]

    def get(self, order_id: str) -> OrderRead:
        with Session(self.engine) as session:
            order = session.get(Order, order_id)
            if not order:
                raise OrderNotFoundError(order_id)
            return OrderRead.model_validate(order)

    def insert(
        self,
        table_number: int,
        line_items: List[LineItem],
        total_amount: int,
        note: str = "",
        submitted_at: Optional[datetime] = None,
    ) -> OrderRead:
        with Session(self.engine) as session:
            order = Order(
                table_number=table_number,
                line_items=[item.model_dump() for item in line_items],
                total_amount=total_amount,
                status=OrderStatus.PENDING,
                note=note or "",
            )
            if submitted_at is not None:
                order.submitted_at = as_utc(submitted_at)

            session.add(order)
            session.commit()
            session.refresh(order)
            logging.info(f"PEDIDOS >>> Pedido {order.id} guardado (mesa {order.table_number})")
            return OrderRead.model_validate(order)

    def update(self, order_id: str, values: Dict[str, Any]) -> OrderRead:
        with Session(self.engine) as session:
            order = session.get(Order, order_id)
            if not order:
                raise OrderNotFoundError(order_id)

            for field, value in values.items():
                setattr(order, field, value)
            if "updated_at" not in values:
                order.updated_at = datetime.now(timezone.utc)

            session.add(order)
            session.commit()
            session.refresh(order)
            return OrderRead.model_validate(order)
