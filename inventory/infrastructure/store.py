from typing import Any, Dict, Iterable, List, Optional
from sqlalchemy import update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from inventory.domain.models import Product
from inventory.application.errors import StoreError
from shared.core import get_logger

logger = get_logger(__name__)

class ProductStore:
    """Product collection backed by a SQLAlchemy session.

    Every database failure is rolled back and surfaced as ``StoreError``.
    """

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, exc: SQLAlchemyError):
        self.db.rollback()
        logger.error(f"Product store {action} failed", exc_info=True)
        raise StoreError("Server error", {"action": action}) from exc

    def find(self) -> List[Product]:
        try:
            return self.db.query(Product).order_by(Product.id).all()
        except SQLAlchemyError as e:
            self._fail("find", e)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        try:
            return self.db.get(Product, product_id)
        except SQLAlchemyError as e:
            self._fail("find_by_id", e)

    def insert(self, fields: Dict[str, Any]) -> Product:
        try:
            obj = Product(**fields)
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return obj
        except SQLAlchemyError as e:
            self._fail("insert", e)

    def insert_many(self, rows: Iterable[Dict[str, Any]]) -> List[Product]:
        try:
            objs = [Product(**row) for row in rows]
            self.db.add_all(objs)
            self.db.commit()
            return objs
        except SQLAlchemyError as e:
            self._fail("insert_many", e)

    def update_by_id(self, product_id: int, fields: Dict[str, Any]) -> Optional[Product]:
        try:
            product = self.db.get(Product, product_id)
            if product is None:
                return None
            for key, value in fields.items():
                setattr(product, key, value)
            self.db.commit()
            self.db.refresh(product)
            return product
        except SQLAlchemyError as e:
            self._fail("update_by_id", e)

    def delete_by_id(self, product_id: int) -> bool:
        try:
            result = self.db.execute(delete(Product).where(Product.id == product_id))
            self.db.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            self._fail("delete_by_id", e)

    def delete_all(self) -> int:
        try:
            result = self.db.execute(delete(Product))
            self.db.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            self._fail("delete_all", e)

    def increment_quantity(self, product_id: int, delta: int) -> Optional[Product]:
        """Add ``delta`` to the quantity in one conditional UPDATE.

        The row only changes when the result stays at or above zero. Returns
        None when nothing matched, either because the product is missing or
        because the floor would be crossed, and when the row is gone by the time
        it is read back.
        """
        stmt = (
            update(Product)
            .where(Product.id == product_id, Product.quantity + delta >= 0)
            .values(quantity=Product.quantity + delta)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(stmt)
            if result.rowcount == 0:
                self.db.rollback()
                return None
            self.db.commit()
            product = self.db.get(Product, product_id)
            if product is None:
                # Deleted right after the update committed
                return None
            self.db.refresh(product)
            return product
        except SQLAlchemyError as e:
            self._fail("increment_quantity", e)
