from datetime import date, datetime, timezone
from decimal import Decimal
from inventory.application.coercion import parse_number, parse_whole_number, parse_price, parse_adjustment, parse_date

def test_parse_number_reads_leading_numeric_prefix():
    assert parse_number("12.5") == 12.5
    assert parse_number("12.5kg") == 12.5
    assert parse_number("  -3") == -3
    assert parse_number(".5") == 0.5
    assert parse_number("1e3") == 1000
    assert parse_number(Decimal("9.99")) == 9.99

def test_parse_number_defaults_to_zero():
    for value in [None, "", "abc", "NaN", "Infinity", float("nan"), float("inf"), True, [], {}]:
        assert parse_number(value) == 0

def test_parse_whole_number_truncates():
    assert parse_whole_number("7.9") == 7
    assert parse_whole_number("-2.5") == -2
    assert parse_whole_number("x") == 0

def test_parse_adjustment_follows_integer_prefix():
    assert parse_adjustment("5") == 5
    assert parse_adjustment("-60") == -60
    assert parse_adjustment("5.7") == 5
    assert parse_adjustment(" +4 units") == 4
    assert parse_adjustment(4.9) == 4
    assert parse_adjustment(-10) == -10

def test_parse_adjustment_rejects_non_integers():
    for value in [None, "", "abc", "-", True, float("nan"), []]:
        assert parse_adjustment(value) is None

def test_parse_date():
    assert parse_date("2025-01-01") == date(2025, 1, 1)
    assert parse_date("2025-01-01T00:00:00.000Z") == date(2025, 1, 1)
    assert parse_date("2025-03-01T23:30:00-05:00") == date(2025, 3, 2)
    assert parse_date(datetime(2025, 5, 6, 10, tzinfo=timezone.utc)) == date(2025, 5, 6)
    assert parse_date(date(2024, 2, 29)) == date(2024, 2, 29)

def test_parse_date_blank_or_invalid_is_none():
    for value in [None, "", "   ", "not a date", "2025-13-40", 20250101]:
        assert parse_date(value) is None

def test_out_of_range_numbers_default_to_zero():
    assert parse_whole_number("1e30") == 0
    assert parse_whole_number(2**31) == 0
    assert parse_whole_number(-2**31 - 1) == 0
    assert parse_whole_number(2**31 - 1) == 2**31 - 1
    assert parse_number(10**400) == 0
    assert parse_price("1e30") == 0
    assert parse_price("99999999.99") == 99999999.99
