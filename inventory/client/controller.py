from typing import Any, Callable, Optional
from inventory.application.errors import InventoryError, InvalidAdjustmentError
from shared.core import get_logger
from .api_client import InventoryClient
from .view import InventoryView

logger = get_logger(__name__)

DELETE_PROMPT = "Delete this product?"

class InventoryController:
    """Runs the screen's actions against the API and keeps the view in sync.

    Each action returns True on success. Failures are logged and leave the
    view as it was; the user retries by repeating the action.
    """

    def __init__(
        self,
        client: InventoryClient,
        view: Optional[InventoryView] = None,
        alert: Optional[Callable[[str], Any]] = None,
        confirm: Optional[Callable[[str], bool]] = None,
    ):
        self.client = client
        self.view = view or InventoryView()
        self.alert = alert or (lambda message: logger.warning(message))
        self.confirm = confirm or (lambda message: True)

    def refresh(self) -> bool:
        try:
            products = self.client.list_products()
        except InventoryError as e:
            logger.error(f"Failed to fetch products: {e}")
            return False
        self.view.load(products)
        return True

    def submit(self) -> bool:
        """Create a product, or update the one being edited."""
        payload = self.view.form.payload()
        try:
            if self.view.is_editing:
                self.client.update_product(self.view.editing_id, payload)
            else:
                self.client.create_product(payload)
        except InventoryError as e:
            logger.error(f"Failed to save product: {e}")
            return False
        self.view.reset_form()
        return self.refresh()

    def edit(self, product_id: int) -> bool:
        product = self.view.find_product(product_id)
        if product is None:
            return False
        self.view.start_edit(product)
        return True

    def delete(self, product_id: int) -> bool:
        if not self.confirm(DELETE_PROMPT):
            return False
        try:
            self.client.delete_product(product_id)
        except InventoryError as e:
            logger.error(f"Failed to delete product {product_id}: {e}")
            return False
        if self.view.editing_id == product_id:
            self.view.reset_form()
        return self.refresh()

    def adjust(self) -> bool:
        try:
            checked = self.view.check_adjustment()
        except InvalidAdjustmentError as e:
            self.alert(e.message)
            return False
        if checked is None:
            return False

        product_id, delta = checked
        try:
            self.client.adjust_stock(product_id, delta, self.view.adjustment.reason)
        except InvalidAdjustmentError as e:
            logger.error(f"Stock adjustment rejected: {e}")
            self.alert(e.message)
            return False
        except InventoryError as e:
            logger.error(f"Failed to adjust stock: {e}")
            return False
        self.view.reset_adjustment()
        return self.refresh()
