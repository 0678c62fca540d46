from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Optional
from datetime import date, datetime
from .coercion import parse_price, parse_whole_number, parse_adjustment, parse_date, in_int_range

class ProductPayload(BaseModel):
    """Create/update body. Numeric fields never fail validation; they fall back to 0."""
    name: str = ""
    price: float = 0
    quantity: int = 0
    category: Optional[str] = None
    in_stock: bool = False
    expiry_date: Optional[date] = None
    min_stock_level: int = 0

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v: Any) -> float:
        return parse_price(v)

    @field_validator("quantity", "min_stock_level", mode="before")
    @classmethod
    def coerce_whole_numbers(cls, v: Any) -> int:
        return parse_whole_number(v)

    @field_validator("in_stock", mode="before")
    @classmethod
    def coerce_in_stock(cls, v: Any) -> Any:
        return False if v is None or v == "" else v

    @field_validator("expiry_date", mode="before")
    @classmethod
    def coerce_expiry_date(cls, v: Any) -> Optional[date]:
        return parse_date(v)

class ProductRead(BaseModel):
    id: int
    name: str
    price: float
    quantity: int
    category: Optional[str] = None
    in_stock: bool = False
    expiry_date: Optional[date] = None
    min_stock_level: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class AdjustmentRequest(BaseModel):
    product_id: int
    adjustment: int
    reason: Optional[str] = ""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("adjustment", mode="before")
    @classmethod
    def parse_adjustment_value(cls, v: Any) -> int:
        parsed = parse_adjustment(v)
        if parsed is None:
            raise ValueError("adjustment must be an integer")
        if not in_int_range(parsed):
            raise ValueError("adjustment is out of range")
        return parsed

    @field_validator("product_id")
    @classmethod
    def check_product_id(cls, v: int) -> int:
        if not in_int_range(v):
            raise ValueError("productId is out of range")
        return v

    @field_validator("reason", mode="before")
    @classmethod
    def coerce_reason(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)
