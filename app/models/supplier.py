from typing import Optional
from sqlmodel import SQLModel


class SupplierBase(SQLModel):
    name: str
    contact_info: Optional[str] = None


class SupplierCreate(SupplierBase):
    """
    Input: Name + optional contact details.
    `supplier_id` may be given to choose the key instead of letting the
    database assign one.
    """
    supplier_id: Optional[int] = None


class SupplierUpdate(SupplierBase):
    pass


class SupplierRead(SupplierBase):
    supplier_id: int


class SupplierCreated(SQLModel):
    message: str
    supplierId: int
