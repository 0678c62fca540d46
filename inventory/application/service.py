from typing import Optional
from sqlalchemy.orm import Session
from inventory.infrastructure.store import ProductStore
from .errors import NEGATIVE_STOCK_MESSAGE, ValidationError, NotFoundError, InvalidAdjustmentError
from .schemas import ProductPayload
from shared.core import get_logger

logger = get_logger(__name__)

class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.store = ProductStore(db)

    def _fields(self, data: ProductPayload) -> dict:
        if not data.name.strip():
            raise ValidationError("Product name is required")
        return data.model_dump()

    def list(self):
        return self.store.find()

    def get(self, product_id: int):
        product = self.store.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found", {"id": product_id})
        return product

    def create(self, data: ProductPayload):
        obj = self.store.insert(self._fields(data))
        logger.info(
            f"Product created: {obj.name}",
            extra={'extra_fields': {'product_id': obj.id, 'quantity': obj.quantity}}
        )
        return obj

    def update(self, product_id: int, data: ProductPayload):
        product = self.store.update_by_id(product_id, self._fields(data))
        if product is None:
            raise NotFoundError("Product not found", {"id": product_id})
        logger.info(
            f"Product updated: {product.name}",
            extra={'extra_fields': {'product_id': product.id, 'quantity': product.quantity}}
        )
        return product

    def delete(self, product_id: int) -> None:
        if not self.store.delete_by_id(product_id):
            raise NotFoundError("Product not found", {"id": product_id})
        logger.info("Product deleted", extra={'extra_fields': {'product_id': product_id}})

    def adjust_stock(self, product_id: int, adjustment: int, reason: Optional[str] = None):
        """Apply a signed stock delta.

        The floor check and the write happen in one conditional update, so
        concurrent adjustments can neither lose updates nor go below zero.
        """
        product = self.store.increment_quantity(product_id, adjustment)
        if product is None:
            current = self.store.find_by_id(product_id)
            if current is None:
                raise NotFoundError("Product not found", {"id": product_id})
            logger.warning(
                "Stock adjustment rejected",
                extra={'extra_fields': {
                    'product_id': product_id,
                    'quantity': current.quantity,
                    'adjustment': adjustment,
                    'reason': reason,
                }}
            )
            raise InvalidAdjustmentError(
                NEGATIVE_STOCK_MESSAGE,
                {"quantity": current.quantity, "adjustment": adjustment}
            )
        logger.info(
            "Stock adjusted",
            extra={'extra_fields': {
                'product_id': product_id,
                'adjustment': adjustment,
                'reason': reason,
                'quantity': product.quantity,
            }}
        )
        return product
