import httpx
import pytest
from fastapi.testclient import TestClient
from inventory.application.errors import NEGATIVE_STOCK_MESSAGE, NotFoundError, InvalidAdjustmentError, ValidationError, StoreError
from inventory.client import InventoryClient, InventoryController, InventoryView
from inventory.client.status import StockStatus
from inventory.client.view import AdjustmentForm, ProductForm
from inventory.main import app

@pytest.fixture
def api():
    return InventoryClient(http=TestClient(app, base_url="http://testserver/api"))

def test_client_crud(api):
    created = api.create_product({"name": "Ladoo", "price": 100, "quantity": 50, "inStock": True})
    assert created.id and created.quantity == 50

    updated = api.update_product(created.id, {"name": "Ladoo", "price": 110, "quantity": 45})
    assert updated.price == 110
    assert [p.id for p in api.list_products()] == [created.id]
    assert api.get_product(created.id).quantity == 45

    api.delete_product(created.id)
    assert api.list_products() == []

def test_client_maps_errors(api):
    with pytest.raises(NotFoundError):
        api.delete_product(123)
    with pytest.raises(ValidationError):
        api.create_product({"name": ""})
    product = api.create_product({"name": "Barfi", "quantity": 5})
    with pytest.raises(InvalidAdjustmentError):
        api.adjust_stock(product.id, -6)
    with pytest.raises(ValidationError):
        api.adjust_stock(product.id, "many")
    assert api.adjust_stock(product.id, "-5", "sold out").quantity == 0

def test_client_network_failure_is_store_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = InventoryClient(http=httpx.Client(base_url="http://inventory.invalid/api",
                                            transport=httpx.MockTransport(refuse)))
    with pytest.raises(StoreError):
        api.list_products()

def test_client_unexpected_status_is_store_error():
    api = InventoryClient(http=httpx.Client(base_url="http://inventory.invalid",
                                            transport=httpx.MockTransport(lambda r: httpx.Response(502, text="bad gateway"))))
    with pytest.raises(StoreError):
        api.list_products()

@pytest.fixture
def alerts():
    return []

@pytest.fixture
def controller(api, alerts):
    return InventoryController(api, InventoryView(), alert=alerts.append)

def test_submit_creates_then_edits(controller):
    controller.view.form = ProductForm(name="Peda", price="80", quantity="12", min_stock_level="15")
    assert controller.submit() is True
    assert controller.view.form == ProductForm()
    [row] = controller.view.rows()
    assert row.name == "Peda"
    assert row.badges.low_stock is True

    assert controller.edit(row.id) is True
    controller.view.form.quantity = "30"
    assert controller.submit() is True
    assert controller.view.editing_id is None
    assert controller.view.products[0].quantity == 30

def test_submit_failure_keeps_form(controller):
    controller.view.form = ProductForm(name="", price="10")
    assert controller.submit() is False
    assert controller.view.form.price == "10"

def test_refresh_resets_page(controller, api):
    for i in range(25):
        api.create_product({"name": f"Sweet {i}", "quantity": 1})
    assert controller.refresh()
    controller.view.goto_page(3)
    controller.view.form = ProductForm(name="Extra", quantity="1")
    assert controller.submit()
    assert controller.view.page == 1
    assert controller.view.total_pages == 3

def test_delete_asks_for_confirmation(api):
    product = api.create_product({"name": "Rasgulla"})
    prompts = []

    def decline(message):
        prompts.append(message)
        return False

    controller = InventoryController(api, confirm=decline)
    assert controller.delete(product.id) is False
    assert prompts == ["Delete this product?"]
    assert len(api.list_products()) == 1

    controller.confirm = lambda message: True
    assert controller.delete(product.id) is True
    assert controller.view.products == []
    assert controller.delete(product.id) is False

def test_adjust_flow(controller, api, alerts):
    product = api.create_product({"name": "Ladoo", "quantity": 50})
    controller.refresh()

    controller.view.adjustment = AdjustmentForm(product_id=str(product.id), adjustment="-60", reason="oops")
    assert controller.adjust() is False
    assert alerts == [NEGATIVE_STOCK_MESSAGE]
    assert api.get_product(product.id).quantity == 50

    controller.view.adjustment = AdjustmentForm(product_id=str(product.id), adjustment="-50", reason="festival")
    assert controller.adjust() is True
    assert controller.view.adjustment == AdjustmentForm()
    [row] = controller.view.rows()
    assert row.quantity == 0
    assert row.badges.status == StockStatus.OUT_OF_STOCK

def test_adjust_with_stale_list_is_rejected_by_server(controller, api, alerts):
    product = api.create_product({"name": "Barfi", "quantity": 50})
    controller.refresh()
    api.adjust_stock(product.id, -45)

    controller.view.adjustment = AdjustmentForm(product_id=str(product.id), adjustment="-10")
    assert controller.adjust() is False
    assert alerts == [NEGATIVE_STOCK_MESSAGE]
    assert api.get_product(product.id).quantity == 5

def test_adjust_without_selection_does_nothing(controller, alerts):
    controller.view.adjustment = AdjustmentForm(product_id="", adjustment="3")
    assert controller.adjust() is False
    assert alerts == []
