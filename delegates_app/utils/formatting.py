"""
Number formatting for console output.

Prices are shown with optional fractional digits only: rounding stops at
`places` digits, trailing zeros are dropped, and a zero integer part is
left out, so 23.9666 -> "23.97", 24.00 -> "24", 0.50 -> ".5", 0 -> "".
"""

from decimal import ROUND_HALF_UP, Decimal


def format_optional_digits(value: Decimal, places: int = 2) -> str:
    """
    Format a decimal with at most `places` fractional digits, none required.

    Args:
        value: Number to format
        places: Maximum number of fractional digits

    Returns:
        Formatted text, rounded half away from zero
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)

    sign = "-" if rounded < 0 else ""
    integer_part, _, fraction = f"{abs(rounded):f}".partition(".")
    fraction = fraction.rstrip("0")
    if integer_part == "0":
        integer_part = ""

    if not integer_part and not fraction:
        return ""
    if fraction:
        return f"{sign}{integer_part}.{fraction}"
    return f"{sign}{integer_part}"


def format_price(value: Decimal, currency_symbol: str = "$", places: int = 2) -> str:
    """Prefix the optional-digit rendering of value with a currency symbol."""
    return f"{currency_symbol}{format_optional_digits(value, places)}"
