"""Domain constants for personal finance tracking."""

from decimal import Decimal

from fintrack.domain.models.finance import Currency

ASSET_CATEGORIES = (
    "cash",
    "bank_deposit",
    "savings_account",
    "investment",
    "real_estate",
    "vehicle",
    "other",
)

DEBT_CATEGORIES = (
    "credit_card",
    "student_loan",
    "mortgage",
    "auto_loan",
    "personal_loan",
    "medical_debt",
    "tax_debt",
    "other",
)

FALLBACK_CATEGORY = "other"

BASE_CURRENCY = "USD"

DEFAULT_EXCHANGE_RATES = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "RON": Decimal("4.56"),
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "RON": "lei",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "C$",
    "AUD": "A$",
    "CHF": "Fr",
    "CNY": "¥",
    "INR": "₹",
}

ENTRY_NAME_MAX_LENGTH = 100
# Numeric(14, 2) columns hold at most 12 integer digits.
ENTRY_VALUE_LIMIT = Decimal("1000000000000")

AVAILABLE_CURRENCIES = (
    Currency(code="RON", symbol="lei"),
    Currency(code="EUR", symbol="€"),
    Currency(code="USD", symbol="$"),
)


__all__ = [
    "ASSET_CATEGORIES",
    "DEBT_CATEGORIES",
    "FALLBACK_CATEGORY",
    "BASE_CURRENCY",
    "DEFAULT_EXCHANGE_RATES",
    "CURRENCY_SYMBOLS",
    "ENTRY_NAME_MAX_LENGTH",
    "ENTRY_VALUE_LIMIT",
    "AVAILABLE_CURRENCIES",
]
