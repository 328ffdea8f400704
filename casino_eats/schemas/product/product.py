from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    price: int = Field(..., ge=0)
    category: str
    available: bool = True
    image_url: Optional[str] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    price: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None
    available: Optional[bool] = None
    image_url: Optional[str] = None


class ProductRead(ProductBase):
    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MenuSection(BaseModel):
    category: str
    products: List[ProductRead] = []


class ProductStats(BaseModel):
    total: int = 0
    available: int = 0
    unavailable: int = 0
    categories: List[str] = []
    average_price: int = 0
