from decimal import Decimal
from typing import List, Optional
from sqlmodel import SQLModel, Field, Relationship


class Supplier(SQLModel, table=True):
    """
    A company that delivers stock. The primary key is usually assigned by
    the database but clients may also choose it explicitly on creation.
    """
    __tablename__ = "suppliers"

    supplier_id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="Auto-increment key, or the value supplied by the client. Example: 5"
    )
    name: str = Field(
        max_length=255,
        description="Display name of the supplier. Example: 'Acme'"
    )
    contact_info: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Free-form contact details. Example: 'a@x.com'"
    )

    products: List["Product"] = Relationship(back_populates="supplier")


class Product(SQLModel, table=True):
    """
    A stocked item. A product may reference the supplier it is bought from;
    the database enforces that reference, the API does not check it.
    """
    __tablename__ = "products"

    product_id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="Auto-increment key."
    )
    name: str = Field(
        max_length=255,
        description="Product name. Example: 'Widget'"
    )
    description: Optional[str] = Field(default=None)
    price: Decimal = Field(
        max_digits=10,
        decimal_places=2,
        description="Unit price. Example: 9.99"
    )
    stock_quantity: int = Field(
        description="Units currently in stock. Example: 10"
    )
    supplier_id: Optional[int] = Field(
        default=None,
        foreign_key="suppliers.supplier_id",
        description="Supplier this product is bought from, if any."
    )

    supplier: Optional[Supplier] = Relationship(back_populates="products")
