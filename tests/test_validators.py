import pytest

from services.validators import normalize_number, parse_amount, parse_quantity


def test_normalize_number():
    assert normalize_number("12 345.67") == "12345.67"
    assert normalize_number(" 1 234 ") == "1234"
    assert normalize_number("1 234,5") == "1234.5"
    assert normalize_number(None) is None
    assert normalize_number(1234) == "1234"
    assert normalize_number("₹ 450") == "450"
    assert normalize_number("Rs.500") == "500"
    assert normalize_number("1,23,456") == "123456"
    assert normalize_number("12,345.50") == "12345.5"


def test_normalize_number_expressions():
    assert normalize_number("2*150") == "300"
    assert normalize_number("500-50") == "450"
    assert normalize_number("10/4") == "2.5"


@pytest.mark.parametrize(
    "raw, expected",
    [("450", 450.0), ("₹1,200.50", 1200.5), ("", 0.0), ("abc", 0.0), (None, 0.0), ("5/0", 0.0), ("1..2", 0.0)],
)
def test_parse_amount_defaults_to_zero(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("3", 3), ("3.7", 3), (" 12 pcs", 12), ("many", 0), ("", 0)],
)
def test_parse_quantity_defaults_to_zero(raw, expected):
    assert parse_quantity(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "1" + "0" * 400,
        "*".join(["9" * 1000] * 6),
        "9" * 300 + ".0*" + "9" * 300 + ".0",
    ],
)
def test_huge_numbers_default_to_zero(raw):
    assert parse_amount(raw) == 0.0
    assert parse_quantity(raw) == 0


def test_normalize_number_drops_infinite_result():
    assert normalize_number("9" * 300 + ".0*" + "9" * 300 + ".0") == ""
