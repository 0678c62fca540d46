"""Inventory errors.

Raised by the store and the service layer; the API layer translates each one
into an HTTP status with a ``{"detail": ...}`` body, and the client maps the
statuses back onto the same classes.
"""

from typing import Any, Dict, Optional

NEGATIVE_STOCK_MESSAGE = "Cannot reduce stock below zero."


class InventoryError(Exception):
    """Base exception for all inventory errors."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ValidationError(InventoryError):
    """A required field is missing or a payload is malformed."""

    status_code = 400


class NotFoundError(InventoryError):
    """The targeted product does not exist."""

    status_code = 404


class InvalidAdjustmentError(InventoryError):
    """A stock adjustment would drive the quantity below zero."""

    status_code = 400


class StoreError(InventoryError):
    """The underlying persistence layer failed."""

    status_code = 500
