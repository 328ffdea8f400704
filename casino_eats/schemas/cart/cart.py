from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from casino_eats.models.order.order import NOTE_MAX_LENGTH
from casino_eats.schemas.cart.cart_item import LineItem
from casino_eats.schemas.table.table_selection import TableSelectionRead


class CartRead(BaseModel):
    code: str
    table: TableSelectionRead
    items: List[LineItem] = []
    total_amount: int
    item_count: int
    formatted_total: str
    created_at: datetime
    updated_at: datetime


class CheckoutRequest(BaseModel):
    note: Optional[str] = Field(default="", max_length=NOTE_MAX_LENGTH)
