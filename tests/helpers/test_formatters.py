from datetime import datetime

import pytest

from casino_eats.helpers.order.formatters import format_currency, format_number, format_order_date


@pytest.mark.parametrize("value, expected", [
    (0, "0"),
    (900, "900"),
    (1500, "1.500"),
    (11800, "11.800"),
    (1234567, "1.234.567"),
])
def test_format_number_uses_dot_thousands(value, expected):
    assert format_number(value) == expected


def test_format_currency():
    assert format_currency(11800) == "$11.800"


def test_format_currency_ignores_locale_decimal_style():
    assert format_currency(4500, locale_str="en_US") == "$4.500"


def test_format_order_date():
    assert format_order_date(datetime(2026, 10, 3, 21, 5)) == "03/10/2026 21:05"
