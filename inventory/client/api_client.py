from typing import Any, Dict, List, Optional
import httpx
from inventory.core_settings import get_settings
from inventory.application.errors import (
    InventoryError,
    ValidationError,
    NotFoundError,
    InvalidAdjustmentError,
    StoreError,
)
from inventory.application.schemas import ProductRead

ERRORS_BY_NAME = {
    "ValidationError": ValidationError,
    "NotFoundError": NotFoundError,
    "InvalidAdjustmentError": InvalidAdjustmentError,
    "StoreError": StoreError,
}
ERRORS_BY_STATUS = {400: ValidationError, 404: NotFoundError}

class InventoryClient:
    """HTTP client for the inventory API.

    ``http`` may be any ``httpx.Client`` (a FastAPI ``TestClient`` included);
    otherwise one is built from ``API_BASE_URL`` and ``CLIENT_TIMEOUT``.
    """

    def __init__(self, base_url: Optional[str] = None, http: Optional[httpx.Client] = None,
                 timeout: Optional[float] = None):
        settings = get_settings()
        self.http = http or httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.CLIENT_TIMEOUT,
        )

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> httpx.Response:
        try:
            response = self.http.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise StoreError("Network error", {"method": method, "path": path, "error": str(e)}) from e
        if response.is_success:
            return response
        raise self._error_for(response)

    @staticmethod
    def _error_for(response: httpx.Response) -> InventoryError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        detail = body.get("detail", response.reason_phrase) if isinstance(body, dict) else response.reason_phrase
        message = detail if isinstance(detail, str) else "Invalid request"
        error_cls = ERRORS_BY_NAME.get(body.get("error") if isinstance(body, dict) else None)
        if error_cls is None:
            error_cls = ERRORS_BY_STATUS.get(response.status_code, StoreError)
        return error_cls(message, {"status_code": response.status_code})

    def list_products(self) -> List[ProductRead]:
        response = self._request("GET", "/products")
        return [ProductRead.model_validate(item) for item in response.json() or []]

    def get_product(self, product_id: int) -> ProductRead:
        return ProductRead.model_validate(self._request("GET", f"/products/{product_id}").json())

    def create_product(self, payload: Dict[str, Any]) -> ProductRead:
        return ProductRead.model_validate(self._request("POST", "/products", json=payload).json())

    def update_product(self, product_id: int, payload: Dict[str, Any]) -> ProductRead:
        return ProductRead.model_validate(self._request("PUT", f"/products/{product_id}", json=payload).json())

    def delete_product(self, product_id: int) -> None:
        self._request("DELETE", f"/products/{product_id}")

    def adjust_stock(self, product_id: Any, adjustment: Any, reason: str = "") -> ProductRead:
        payload = {"productId": product_id, "adjustment": adjustment, "reason": reason}
        return ProductRead.model_validate(self._request("POST", "/products/adjust", json=payload).json())
