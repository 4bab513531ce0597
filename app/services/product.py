from typing import List
from loguru import logger
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import text

from app.core.exceptions import NotFoundError, QueryError
from app.models.product import ProductCreate, ProductRead, ProductUpdate


SELECT_PRODUCTS = text(
    "SELECT product_id, name, description, price, stock_quantity, supplier_id "
    "FROM products ORDER BY product_id"
)
SELECT_PRODUCT = text(
    "SELECT product_id, name, description, price, stock_quantity, supplier_id "
    "FROM products WHERE product_id = :product_id"
)
INSERT_PRODUCT = text(
    "INSERT INTO products (name, description, price, stock_quantity, supplier_id) "
    "VALUES (:name, :description, :price, :stock_quantity, :supplier_id)"
)
UPDATE_PRODUCT = text(
    "UPDATE products SET name = :name, description = :description, price = :price, "
    "stock_quantity = :stock_quantity, supplier_id = :supplier_id "
    "WHERE product_id = :product_id"
)
DELETE_PRODUCT = text("DELETE FROM products WHERE product_id = :product_id")


class ProductService:
    """
    Runs the product endpoints against the `products` table.

    Every method executes exactly one parameterized statement on the
    connection it was given. Driver errors are logged here and re-raised
    as QueryError so that no database exception reaches the router.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def list_products(self) -> List[ProductRead]:
        try:
            rows = self.connection.execute(SELECT_PRODUCTS).mappings().all()
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch products")
            raise QueryError("Failed to fetch products") from e

        return [ProductRead.model_validate(dict(row)) for row in rows]

    def get_product(self, product_id: int) -> ProductRead:
        try:
            row = self.connection.execute(
                SELECT_PRODUCT, {"product_id": product_id}
            ).mappings().first()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to fetch product {product_id}")
            raise QueryError("Failed to fetch product") from e

        if row is None:
            raise NotFoundError("Product not found")

        return ProductRead.model_validate(dict(row))

    def create_product(self, data: ProductCreate) -> int:
        """
        Inserts a product and returns the id the database assigned to it.
        Optional fields that are missing or empty are written as NULL.
        """
        try:
            result = self.connection.execute(INSERT_PRODUCT, self._params(data))
            product_id = result.lastrowid
            self.connection.commit()
        except SQLAlchemyError as e:
            # Includes foreign key violations for an unknown supplier_id
            logger.exception("Failed to add product")
            raise QueryError("Failed to add product") from e

        logger.info(f"Product '{data.name}' added with id {product_id}")
        return product_id

    def update_product(self, product_id: int, data: ProductUpdate) -> None:
        """
        Full replace of every mutable column.

        Raises:
            NotFoundError: If no row has this id.
        """
        params = self._params(data)
        params["product_id"] = product_id

        try:
            result = self.connection.execute(UPDATE_PRODUCT, params)
            affected = result.rowcount
            self.connection.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to update product {product_id}")
            raise QueryError("Failed to update product") from e

        if affected == 0:
            raise NotFoundError("Product not found")

        logger.info(f"Product {product_id} updated")

    def delete_product(self, product_id: int) -> None:
        try:
            result = self.connection.execute(DELETE_PRODUCT, {"product_id": product_id})
            affected = result.rowcount
            self.connection.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to delete product {product_id}")
            raise QueryError("Failed to delete product") from e

        if affected == 0:
            raise NotFoundError("Product not found")

        logger.info(f"Product {product_id} deleted")

    @staticmethod
    def _params(data: ProductCreate) -> dict:
        return {
            "name": data.name,
            "description": data.description or None,
            "price": data.price,
            "stock_quantity": data.stock_quantity,
            "supplier_id": data.supplier_id or None,
        }
