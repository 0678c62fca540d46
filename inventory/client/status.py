"""Stock status badges shown next to each product row."""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Optional

from inventory.application.coercion import parse_number, parse_date


class StockStatus(str, Enum):
    OUT_OF_STOCK = "out_of_stock"
    IN_STOCK = "in_stock"
    IN_STOCK_EXPIRED = "in_stock_expired"


STATUS_LABELS = {
    StockStatus.OUT_OF_STOCK: "❌ Out of Stock",
    StockStatus.IN_STOCK: "✅ In Stock",
    StockStatus.IN_STOCK_EXPIRED: "✅ In Stock • ⛔ Expired",
}
LOW_STOCK_LABEL = "⚠️ Low Stock"


@dataclass(frozen=True)
class StockBadges:
    status: StockStatus
    low_stock: bool = False

    @property
    def labels(self) -> list[str]:
        labels = [STATUS_LABELS[self.status]]
        if self.low_stock:
            labels.append(LOW_STOCK_LABEL)
        return labels


def is_expired(expiry_date: Optional[date], now: datetime) -> bool:
    """A product expires once the start of its expiry day (UTC) has passed."""
    if expiry_date is None:
        return False
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return datetime.combine(expiry_date, time.min, tzinfo=timezone.utc) < now


def derive_stock_status(
    quantity: Any,
    min_stock_level: Any = 0,
    expiry_date: Any = None,
    now: Optional[datetime] = None,
) -> StockBadges:
    qty = parse_number(quantity)
    minimum = parse_number(min_stock_level)
    if qty <= 0:
        return StockBadges(StockStatus.OUT_OF_STOCK)

    now = now or datetime.now(timezone.utc)
    status = StockStatus.IN_STOCK_EXPIRED if is_expired(parse_date(expiry_date), now) else StockStatus.IN_STOCK
    return StockBadges(status, low_stock=qty <= minimum)
