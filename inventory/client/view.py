"""View state for the inventory screen.

Everything the screen shows is derived from ``InventoryView``: the product
list, the current page, the product form (and which product it edits), and the
stock adjustment form. The caller owns the instance.
"""

from dataclasses import dataclass, field, asdict
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from inventory.application.coercion import parse_adjustment, parse_number
from inventory.application.errors import NEGATIVE_STOCK_MESSAGE, InvalidAdjustmentError
from inventory.application.schemas import ProductPayload, ProductRead
from .pagination import PAGE_SIZE, Page, clamp_page, paginate, total_pages
from .status import StockBadges, derive_stock_status


def _plain_number(value: Any) -> str:
    number = float(value)
    return str(int(number)) if number.is_integer() else str(number)


def format_price(price: Any) -> str:
    return f"₹{_plain_number(price)}"


def format_date(value: Optional[date]) -> str:
    """Day/month/year for display, ``-`` when there is no date."""
    return value.strftime("%d/%m/%Y") if value else "-"


@dataclass
class ProductForm:
    """Raw form input; values stay as typed until the form is submitted."""
    name: str = ""
    price: str = ""
    quantity: str = ""
    category: str = ""
    in_stock: bool = False
    expiry_date: str = ""
    min_stock_level: str = ""

    def payload(self) -> Dict[str, Any]:
        return ProductPayload.model_validate(asdict(self)).model_dump(mode="json", by_alias=True)


@dataclass
class AdjustmentForm:
    product_id: str = ""
    adjustment: str = ""
    reason: str = ""

    def payload(self) -> Dict[str, Any]:
        return {"productId": self.product_id, "adjustment": self.adjustment, "reason": self.reason}


@dataclass(frozen=True)
class ProductRow:
    id: int
    name: str
    price: str
    quantity: int
    category: str
    expiry: str
    badges: StockBadges


@dataclass
class InventoryView:
    products: List[ProductRead] = field(default_factory=list)
    page: int = 1
    form: ProductForm = field(default_factory=ProductForm)
    editing_id: Optional[int] = None
    adjustment: AdjustmentForm = field(default_factory=AdjustmentForm)
    page_size: int = PAGE_SIZE

    def load(self, products: Iterable[ProductRead]) -> None:
        """Replace the product list after a fetch and go back to page 1."""
        self.products = list(products)
        self.page = 1

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.products), self.page_size)

    def current_page(self) -> Page[ProductRead]:
        return paginate(self.products, self.page, self.page_size)

    def goto_page(self, page: int) -> int:
        self.page = clamp_page(page, len(self.products), self.page_size)
        return self.page

    def next_page(self) -> int:
        return self.goto_page(self.page + 1)

    def prev_page(self) -> int:
        return self.goto_page(self.page - 1)

    def rows(self, now: Optional[datetime] = None) -> List[ProductRow]:
        return [
            ProductRow(
                id=p.id,
                name=p.name,
                price=format_price(p.price),
                quantity=p.quantity,
                category=p.category or "-",
                expiry=format_date(p.expiry_date),
                badges=derive_stock_status(p.quantity, p.min_stock_level, p.expiry_date, now),
            )
            for p in self.current_page().items
        ]

    # Product form

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def start_edit(self, product: ProductRead) -> None:
        self.form = ProductForm(
            name=product.name or "",
            price=_plain_number(product.price),
            quantity=str(product.quantity),
            category=product.category or "",
            in_stock=bool(product.in_stock),
            expiry_date=product.expiry_date.isoformat() if product.expiry_date else "",
            min_stock_level=str(product.min_stock_level),
        )
        self.editing_id = product.id

    def reset_form(self) -> None:
        self.form = ProductForm()
        self.editing_id = None

    # Stock adjustment form

    def find_product(self, product_id: Any) -> Optional[ProductRead]:
        return next((p for p in self.products if str(p.id) == str(product_id)), None)

    def check_adjustment(self) -> Optional[Tuple[int, int]]:
        """Pre-check the adjustment against the last fetched quantities.

        Returns ``(product_id, delta)`` when the request is worth sending and
        None when no product is selected or the delta is not an integer.
        The server re-checks, since the list may be stale.
        """
        product = self.find_product(self.adjustment.product_id)
        delta = parse_adjustment(self.adjustment.adjustment)
        if product is None or delta is None:
            return None
        if parse_number(product.quantity) + delta < 0:
            raise InvalidAdjustmentError(NEGATIVE_STOCK_MESSAGE, {"product_id": product.id})
        return product.id, delta

    def reset_adjustment(self) -> None:
        self.adjustment = AdjustmentForm()
