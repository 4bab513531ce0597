from typing import Optional
from sqlmodel import SQLModel


class ProductBase(SQLModel):
    name: str
    description: Optional[str] = None
    price: float
    stock_quantity: int
    supplier_id: Optional[int] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    """
    PUT payload. Every mutable column is overwritten, so optional fields
    left out of the body are stored as NULL.
    """
    pass


class ProductRead(ProductBase):
    product_id: int


class ProductCreated(SQLModel):
    message: str
    productId: int
