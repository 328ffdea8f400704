from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid
from sqlmodel import Field, SQLModel
from sqlalchemy import JSON, Column, Enum

from casino_eats.enums.order_status import OrderStatus

NOTE_MAX_LENGTH = 200


def generate_order_id() -> str:
    return str(uuid.uuid4())


class Order(SQLModel, table=True):
    __tablename__ = "pedidos_casino"

    id: str = Field(default_factory=generate_order_id, primary_key=True)

    table_number: int = Field(index=True)

    # Copia de los productos con el precio congelado al momento del pedido
    line_items: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    total_amount: int = Field(default=0, ge=0)

    status: OrderStatus = Field(
        default=OrderStatus.PENDING,
        sa_column=Column(
            Enum(OrderStatus, values_callable=lambda statuses: [s.value for s in statuses]),
            nullable=False,
        ),
    )

    note: str = Field(default="", max_length=NOTE_MAX_LENGTH)

    submitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    delivered_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None
