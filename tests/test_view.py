from datetime import date, datetime, timezone
import pytest
from inventory.application.errors import InvalidAdjustmentError
from inventory.application.schemas import ProductRead
from inventory.client.status import StockStatus
from inventory.client.view import InventoryView, ProductForm, AdjustmentForm, format_price, format_date

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

def product(id, **fields):
    data = {"id": id, "name": f"Sweet {id}", "price": 100, "quantity": 50}
    data.update(fields)
    return ProductRead.model_validate(data)

def test_load_resets_to_first_page():
    view = InventoryView()
    view.load([product(i) for i in range(1, 26)])
    view.goto_page(3)
    assert view.page == 3
    view.load([product(i) for i in range(1, 26)])
    assert view.page == 1
    assert view.total_pages == 3

def test_page_navigation_clamps():
    view = InventoryView()
    view.load([product(i) for i in range(1, 26)])
    assert view.prev_page() == 1
    assert view.next_page() == 2
    assert view.goto_page(9) == 3
    assert view.next_page() == 3
    assert [p.id for p in view.current_page().items] == list(range(21, 26))

def test_rows_format_display_values():
    view = InventoryView()
    view.load([
        product(1, price=99.5, category="Sweet", expiryDate="2024-06-01", quantity=4, minStockLevel=5),
        product(2, quantity=0),
    ])
    first, second = view.rows(now=NOW)
    assert first.price == "₹99.5"
    assert first.category == "Sweet"
    assert first.expiry == "01/06/2024"
    assert first.badges.status == StockStatus.IN_STOCK_EXPIRED
    assert first.badges.low_stock is True
    assert second.price == "₹100"
    assert second.category == "-"
    assert second.expiry == "-"
    assert second.badges.status == StockStatus.OUT_OF_STOCK

def test_formatters():
    assert format_price(130) == "₹130"
    assert format_price("12.25") == "₹12.25"
    assert format_date(date(2025, 1, 9)) == "09/01/2025"
    assert format_date(None) == "-"

def test_start_edit_prefills_form():
    view = InventoryView()
    p = product(7, name="Barfi", price=150, quantity=40, category="Sweet", inStock=True,
                expiryDate="2025-02-03", minStockLevel=5)
    view.start_edit(p)
    assert view.is_editing and view.editing_id == 7
    assert view.form == ProductForm(name="Barfi", price="150", quantity="40", category="Sweet",
                                    in_stock=True, expiry_date="2025-02-03", min_stock_level="5")
    view.reset_form()
    assert not view.is_editing
    assert view.form == ProductForm()

def test_form_payload_coerces_input():
    form = ProductForm(name="Jalebi", price="60.5", quantity="oops", category="", in_stock=False,
                       expiry_date="", min_stock_level="3")
    assert form.payload() == {
        "name": "Jalebi", "price": 60.5, "quantity": 0, "category": "", "inStock": False,
        "expiryDate": None, "minStockLevel": 3,
    }

def test_check_adjustment():
    view = InventoryView()
    view.load([product(1, quantity=50)])

    view.adjustment = AdjustmentForm(product_id="1", adjustment="-50", reason="sold")
    assert view.check_adjustment() == (1, -50)

    view.adjustment = AdjustmentForm(product_id="1", adjustment="-60")
    with pytest.raises(InvalidAdjustmentError) as exc:
        view.check_adjustment()
    assert exc.value.message == "Cannot reduce stock below zero."

def test_check_adjustment_ignores_incomplete_form():
    view = InventoryView()
    view.load([product(1)])
    view.adjustment = AdjustmentForm(product_id="", adjustment="5")
    assert view.check_adjustment() is None
    view.adjustment = AdjustmentForm(product_id="1", adjustment="five")
    assert view.check_adjustment() is None
    view.adjustment = AdjustmentForm(product_id="2", adjustment="5")
    assert view.check_adjustment() is None

def test_adjustment_form_payload():
    form = AdjustmentForm(product_id="3", adjustment="-2", reason="broken")
    assert form.payload() == {"productId": "3", "adjustment": "-2", "reason": "broken"}
