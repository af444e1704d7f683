import pytest

from salesdoc.services.currency import format_currency, format_plain


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1234567.5, "₹12,34,567.50"),
        (123456, "₹1,23,456.00"),
        (100000000, "₹10,00,00,000.00"),
        (1000, "₹1,000.00"),
        (999, "₹999.00"),
        (0, "₹0.00"),
        (-1500, "-₹1,500.00"),
        (-0.001, "₹0.00"),
    ],
)
def test_indian_grouping(amount, expected):
    assert format_currency(amount) == expected


def test_non_finite_amounts_render_without_digits():
    assert format_currency(float("inf")) == "₹∞"
    assert format_currency(float("-inf"), locale="en-US", currency_code="USD") == "-$∞"
    assert format_currency(float("nan")) == "NaN"


def test_missing_amount_renders_dash():
    assert format_currency(None) == "-"


def test_other_locales_group_by_thousands():
    assert format_currency(1234567.5, locale="en-US", currency_code="USD") == "$1,234,567.50"
    assert format_currency(1234567.5, locale="en_IN") == "₹12,34,567.50"


def test_unknown_currency_uses_code():
    assert format_currency(1234, locale="en-US", currency_code="aed") == "AED 1,234.00"


def test_plain_print_format():
    assert format_plain(1900) == "INR 1900.00"
    assert format_plain(-50) == "INR -50.00"
    assert format_plain(None, "usd") == "USD 0.00"
