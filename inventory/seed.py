"""Reset the products table to the shop's default catalogue.

Usage: python -m inventory.seed
"""

from inventory.infrastructure.db import SessionLocal, init_models
from inventory.infrastructure.store import ProductStore
from shared.core import setup_logging, get_logger
from inventory.core_settings import get_settings

logger = get_logger(__name__)

DEFAULT_PRODUCTS = [
    {"name": "Ladoo", "price": 100, "category": "Sweet", "in_stock": True, "quantity": 50},
    {"name": "Barfi", "price": 150, "category": "Sweet", "in_stock": True, "quantity": 40},
    {"name": "Rasgulla", "price": 130, "category": "Sweet", "in_stock": False, "quantity": 0},
]

def seed_products(products=None) -> int:
    init_models()
    db = SessionLocal()
    try:
        store = ProductStore(db)
        removed = store.delete_all()
        inserted = store.insert_many(products if products is not None else DEFAULT_PRODUCTS)
    finally:
        db.close()
    logger.info(
        "Products seeded successfully",
        extra={'extra_fields': {'removed': removed, 'inserted': len(inserted)}}
    )
    return len(inserted)

def main():
    settings = get_settings()
    setup_logging(service_name=f"{settings.SERVICE_NAME}-seed", level=settings.LOG_LEVEL)
    seed_products()

if __name__ == "__main__":
    main()
