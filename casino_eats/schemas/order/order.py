from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from casino_eats.enums.order_status import OrderStatus
from casino_eats.models.order.order import NOTE_MAX_LENGTH
from casino_eats.schemas.cart.cart_item import LineItem
from casino_eats.utils.dates import as_utc


# --- ORDER CREATE ---
class OrderCreate(BaseModel):
    table_number: int
    line_items: List[LineItem] = Field(..., min_length=1)
    note: Optional[str] = Field(default="", max_length=NOTE_MAX_LENGTH)

    @property
    def total_amount(self) -> int:
        return sum(item.subtotal for item in self.line_items)


class StatusUpdateRequest(BaseModel):
    status: str


# --- ORDER READ ---
class OrderRead(BaseModel):
    id: str
    table_number: int
    line_items: List[LineItem]
    total_amount: int
    status: OrderStatus
    note: str = ""
    submitted_at: datetime
    delivered_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_validator("submitted_at", "delivered_at", "created_at", "updated_at")
    @classmethod
    def normalize_dates(cls, value):
        return as_utc(value)

    class Config:
        from_attributes = True


class OrderStats(BaseModel):
    pending: int = 0
    in_preparation: int = 0
    ready: int = 0
    delivered: int = 0


class OrderViewRead(BaseModel):
    """Vista que consume el panel: una sola consulta, dos particiones."""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    orders: List[OrderRead] = []
    active: List[OrderRead] = []
    history: List[OrderRead] = []
    history_total: int = 0
    stats: OrderStats = OrderStats()
    fetched_at: Optional[datetime] = None
    is_loading: bool = False
    error: Optional[str] = None


class StatusOptionsRead(BaseModel):
    current: OrderStatus
    next: Optional[OrderStatus] = None
    options: List[OrderStatus] = []
    is_terminal: bool = False
