"""Translate inventory errors into JSON responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from inventory.application.errors import InventoryError, StoreError
from shared.core import get_logger

logger = get_logger(__name__)

async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error(f"Store error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=exc.status_code, content={"detail": "Server error", "error": "StoreError"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "error": type(exc).__name__})

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors()), "error": "ValidationError"},
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InventoryError, inventory_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
