"""통화(PKR) 표시 유틸리티."""

import math

CURRENCY_SYMBOL = "Rs"
CURRENCY_CODE = "PKR"


def format_pkr(amount, show_decimals: bool = True) -> str:
    """
    금액을 PKR 표기 문자열로 변환합니다.

    숫자로 변환할 수 없는 값은 0으로 취급합니다.

    Example:
        >>> format_pkr(1234.5)
        'Rs 1,234.50'
        >>> format_pkr("1234.5", show_decimals=False)
        'Rs 1,235'
    """
    try:
        value = float(amount)
    except (TypeError, ValueError):
        value = 0.0

    if show_decimals:
        return f"{CURRENCY_SYMBOL} {value:,.2f}"
    # .5는 항상 올림
    return f"{CURRENCY_SYMBOL} {math.floor(value + 0.5):,}"
