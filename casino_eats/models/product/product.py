from datetime import datetime, timezone
from typing import Optional
import uuid
from sqlmodel import Field, SQLModel


def generate_product_id() -> str:
    return str(uuid.uuid4())


class Product(SQLModel, table=True):
    __tablename__ = "productos"

    id: str = Field(default_factory=generate_product_id, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = None
    price: int = Field(default=0, ge=0)
    category: str = Field(index=True)
    available: bool = Field(default=True)
    image_url: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = Field(default=None)
