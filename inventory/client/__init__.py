"""Client side of the inventory screen: API access plus derived view state."""

from .api_client import InventoryClient
from .controller import InventoryController
from .pagination import PAGE_SIZE, Page, paginate, total_pages, clamp_page
from .status import StockStatus, StockBadges, derive_stock_status
from .view import InventoryView, ProductForm, AdjustmentForm, ProductRow

__all__ = [
    "InventoryClient",
    "InventoryController",
    "PAGE_SIZE",
    "Page",
    "paginate",
    "total_pages",
    "clamp_page",
    "StockStatus",
    "StockBadges",
    "derive_stock_status",
    "InventoryView",
    "ProductForm",
    "AdjustmentForm",
    "ProductRow",
]
