"""
Money Utilities - Decimal operations for cart prices.

Avoids float precision issues by using Decimal throughout. A missing
price is represented by MISSING_PRICE (quiet NaN), which propagates
through arithmetic instead of raising.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Contribution of a line whose price cannot be resolved
MISSING_PRICE = Decimal("NaN")

# Currency codes that may be used instead of symbols
CURRENCY_SYMBOLS = {
    "GBP": "£",
    "USD": "$",
    "EUR": "€",
}


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or MISSING_PRICE if None/invalid
    """
    if value is None:
        return MISSING_PRICE

    if isinstance(value, Decimal):
        return value

    try:
        # Convert via string to avoid float precision issues
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return MISSING_PRICE


def is_number(value: Decimal) -> bool:
    """False for NaN (a contaminated total) and infinities."""
    return value.is_finite()


def multiply(value: Number, factor: Number) -> Decimal:
    """Multiplication of a monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def round_money(value: Number) -> Decimal:
    """Round monetary value to two decimal places. NaN and infinities are returned as is."""
    decimal_value = to_decimal(value)
    if not is_number(decimal_value):
        return decimal_value
    return decimal_value.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value: Number, currency: str) -> str:
    """
    Format monetary value with its currency symbol.

    Args:
        value: Value to format
        currency: Currency symbol ("£") or code ("GBP")

    Returns:
        Formatted string, e.g. "£1,250.00"
    """
    decimal_value = round_money(value)
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    if not is_number(decimal_value):
        return f"{symbol}{decimal_value}"
    return f"{symbol}{decimal_value:,.2f}"
