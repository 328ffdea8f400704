from pydantic import BaseModel, Field


class LineItem(BaseModel):
    id: str
    name: str
    unit_price: int = Field(..., ge=0)
    quantity: int = Field(..., ge=1)

    @property
    def subtotal(self) -> int:
        return self.unit_price * self.quantity

    class Config:
        from_attributes = True


class CartItemCreate(BaseModel):
    product_id: str


class CartItemUpdate(BaseModel):
    # Valor absoluto; 0 o negativo elimina el producto
    quantity: int
