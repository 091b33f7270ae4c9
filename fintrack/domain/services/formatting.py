"""Display formatting helpers."""

from decimal import Decimal

from fintrack.domain.constants import CURRENCY_SYMBOLS


def format_category_name(category: str) -> str:
    """Turn ``bank_deposit`` into ``Bank Deposit``."""
    return " ".join(
        word[:1].upper() + word[1:] for word in category.split("_")
    )


def get_currency_symbol(currency_code: str) -> str:
    """Return the display symbol for a code, or the code itself."""
    return CURRENCY_SYMBOLS.get(currency_code, currency_code)


def format_currency_with_symbol(amount: Decimal, currency_code: str) -> str:
    """Format an amount with its symbol and two decimals.

    Args:
        amount: Amount to format.
        currency_code: Currency the amount is expressed in.

    Returns:
        str: Value such as ``$1,234.50`` or ``lei12.00``.
    """
    return f"{get_currency_symbol(currency_code)}{Decimal(amount):,.2f}"


def format_share(share: Decimal) -> str:
    """Format a percentage share with one decimal."""
    return f"{share:.1f}%"


__all__ = [
    "format_category_name",
    "get_currency_symbol",
    "format_currency_with_symbol",
    "format_share",
]
