from fastapi import Depends
from sqlalchemy.engine import Connection

from app.db.core import get_connection
from app.services.product import ProductService
from app.services.supplier import SupplierService


def get_product_service(connection: Connection = Depends(get_connection)) -> ProductService:
    """Creates a ProductService bound to the request's connection."""
    return ProductService(connection)


def get_supplier_service(connection: Connection = Depends(get_connection)) -> SupplierService:
    return SupplierService(connection=connection)
