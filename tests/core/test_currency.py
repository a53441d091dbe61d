"""
PKR 통화 표시 테스트
"""

import pytest

from posdash.core.currency import format_pkr, CURRENCY_SYMBOL, CURRENCY_CODE


def test_currency_constants():
    assert CURRENCY_SYMBOL == "Rs"
    assert CURRENCY_CODE == "PKR"


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1234.5, "Rs 1,234.50"),
        (0, "Rs 0.00"),
        ("2500", "Rs 2,500.00"),
        (1000000, "Rs 1,000,000.00"),
    ],
)
def test_format_with_decimals(amount, expected):
    assert format_pkr(amount) == expected


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1234.5, "Rs 1,235"),
        (1234.4, "Rs 1,234"),
        (2.5, "Rs 3"),
    ],
)
def test_format_without_decimals(amount, expected):
    """소수점 없이 표시할 때 .5는 올림"""
    assert format_pkr(amount, show_decimals=False) == expected


@pytest.mark.parametrize("amount", [None, "abc", ""])
def test_invalid_amount_is_zero(amount):
    assert format_pkr(amount) == "Rs 0.00"
