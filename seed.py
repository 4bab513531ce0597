from decimal import Decimal

from loguru import logger
from sqlmodel import Session, SQLModel, select

from app.core.config import Settings
from app.core.logging import setup_logging
from app.db.core import create_db_engine
from app.db.schema import Product, Supplier


# 1. Suppliers, keyed by the id they are created with
DEFAULT_SUPPLIERS = [
    {"supplier_id": 1, "name": "Acme Components", "contact_info": "sales@acme.example"},
    {"supplier_id": 2, "name": "Northwind Traders", "contact_info": "+1 555 0100"},
    {"supplier_id": 3, "name": "Globex Packaging", "contact_info": None},
]

# 2. Products, linked to the suppliers above
DEFAULT_PRODUCTS = [
    {
        "name": "Widget",
        "description": "Standard steel widget",
        "price": Decimal("9.99"),
        "stock_quantity": 120,
        "supplier_id": 1,
    },
    {
        "name": "Gadget",
        "description": None,
        "price": Decimal("24.50"),
        "stock_quantity": 35,
        "supplier_id": 2,
    },
    {
        "name": "Shipping Box",
        "description": "Corrugated, 40x30x20 cm",
        "price": Decimal("1.20"),
        "stock_quantity": 1000,
        "supplier_id": 3,
    },
]


def seed_suppliers(session: Session):
    logger.info("--- Seeding Suppliers ---")

    for data in DEFAULT_SUPPLIERS:
        supplier = session.get(Supplier, data["supplier_id"])
        if not supplier:
            session.add(Supplier(**data))
            logger.info(f"Created Supplier: {data['name']}")
        else:
            logger.info(f"Existing Supplier: {data['name']}")

    # Products reference these rows
    session.flush()


def seed_products(session: Session):
    logger.info("--- Seeding Products ---")

    for data in DEFAULT_PRODUCTS:
        product = session.exec(
            select(Product).where(Product.name == data["name"])).first()
        if not product:
            session.add(Product(**data))
            logger.info(f"Created Product: {data['name']}")
        else:
            logger.info(f"Existing Product: {data['name']}")


def main():
    settings = Settings()
    setup_logging(settings)

    engine = create_db_engine(settings)

    # Ensure tables exist
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        try:
            seed_suppliers(session)
            seed_products(session)

            session.commit()
            logger.info("Database seeding completed successfully.")

        except Exception as e:
            session.rollback()
            logger.error(f"Seeding failed: {e}")
            raise e


if __name__ == "__main__":
    main()
