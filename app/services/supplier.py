from typing import List
from loguru import logger
from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import text

from app.core.exceptions import DuplicateKeyError, NotFoundError, QueryError
from app.db.core import is_duplicate_key
from app.models.supplier import SupplierCreate, SupplierRead, SupplierUpdate


SELECT_SUPPLIERS = text(
    "SELECT supplier_id, name, contact_info FROM suppliers ORDER BY supplier_id"
)
SELECT_SUPPLIER = text(
    "SELECT supplier_id, name, contact_info FROM suppliers WHERE supplier_id = :supplier_id"
)
# The key column is only part of the statement when the client chose the id
INSERT_SUPPLIER_WITH_ID = text(
    "INSERT INTO suppliers (supplier_id, name, contact_info) "
    "VALUES (:supplier_id, :name, :contact_info)"
)
INSERT_SUPPLIER = text(
    "INSERT INTO suppliers (name, contact_info) VALUES (:name, :contact_info)"
)
UPDATE_SUPPLIER = text(
    "UPDATE suppliers SET name = :name, contact_info = :contact_info "
    "WHERE supplier_id = :supplier_id"
)
DELETE_SUPPLIER = text("DELETE FROM suppliers WHERE supplier_id = :supplier_id")


class SupplierService:
    """
    Runs the supplier endpoints against the `suppliers` table.

    Same contract as ProductService, except that creation may carry a
    client-chosen key and reports a collision on it as DuplicateKeyError.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def list_suppliers(self) -> List[SupplierRead]:
        try:
            rows = self.connection.execute(SELECT_SUPPLIERS).mappings().all()
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch suppliers")
            raise QueryError("Failed to fetch suppliers") from e

        return [SupplierRead.model_validate(dict(row)) for row in rows]

    def get_supplier(self, supplier_id: int) -> SupplierRead:
        try:
            row = self.connection.execute(
                SELECT_SUPPLIER, {"supplier_id": supplier_id}
            ).mappings().first()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to fetch supplier {supplier_id}")
            raise QueryError("Failed to fetch supplier") from e

        if row is None:
            raise NotFoundError("Supplier not found")

        return SupplierRead.model_validate(dict(row))

    def create_supplier(self, data: SupplierCreate) -> int:
        """
        Inserts a supplier.

        Args:
            data (SupplierCreate): Name, contact details and an optional key.

        Returns:
            int: The client-supplied key, or the one the database assigned.

        Raises:
            DuplicateKeyError: If the supplied key is already taken.
            QueryError: For any other database failure.
        """
        params = {"name": data.name, "contact_info": data.contact_info or None}

        if data.supplier_id:
            statement = INSERT_SUPPLIER_WITH_ID
            params["supplier_id"] = data.supplier_id
        else:
            statement = INSERT_SUPPLIER

        try:
            result = self.connection.execute(statement, params)
            supplier_id = data.supplier_id or result.lastrowid
            self.connection.commit()
        except IntegrityError as e:
            if is_duplicate_key(e):
                logger.warning(f"Supplier id {data.supplier_id} already exists")
                raise DuplicateKeyError("Supplier ID already exists") from e
            logger.exception("Failed to add supplier")
            raise QueryError("Failed to add supplier") from e
        except SQLAlchemyError as e:
            logger.exception("Failed to add supplier")
            raise QueryError("Failed to add supplier") from e

        logger.info(f"Supplier '{data.name}' added with id {supplier_id}")
        return supplier_id

    def update_supplier(self, supplier_id: int, data: SupplierUpdate) -> None:
        params = {
            "name": data.name,
            "contact_info": data.contact_info or None,
            "supplier_id": supplier_id,
        }

        try:
            result = self.connection.execute(UPDATE_SUPPLIER, params)
            affected = result.rowcount
            self.connection.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to update supplier {supplier_id}")
            raise QueryError("Failed to update supplier") from e

        if affected == 0:
            raise NotFoundError("Supplier not found")

        logger.info(f"Supplier {supplier_id} updated")

    def delete_supplier(self, supplier_id: int) -> None:
        """
        Deletes a supplier. Products that still reference it make the
        database reject the statement, which surfaces as QueryError.
        """
        try:
            result = self.connection.execute(DELETE_SUPPLIER, {"supplier_id": supplier_id})
            affected = result.rowcount
            self.connection.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to delete supplier {supplier_id}")
            raise QueryError("Failed to delete supplier") from e

        if affected == 0:
            raise NotFoundError("Supplier not found")

        logger.info(f"Supplier {supplier_id} deleted")
