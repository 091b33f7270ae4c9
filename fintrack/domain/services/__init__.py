"""Domain services package."""

from .finance import (
    build_net_worth_trend,
    compute_category_breakdown,
    compute_dashboard_summary,
    compute_net_worth_summary,
    filter_entries,
    rank_entries,
)
from .formatting import (
    format_category_name,
    format_currency_with_symbol,
    format_share,
    get_currency_symbol,
)
from .fx import ExchangeRateTable, convert_amount, parse_rates_payload
from .validation import (
    categories_for,
    coerce_category,
    validate_entry_input,
)

__all__ = [
    "build_net_worth_trend",
    "compute_category_breakdown",
    "compute_dashboard_summary",
    "compute_net_worth_summary",
    "filter_entries",
    "rank_entries",
    "format_category_name",
    "format_currency_with_symbol",
    "format_share",
    "get_currency_symbol",
    "ExchangeRateTable",
    "convert_amount",
    "parse_rates_payload",
    "categories_for",
    "coerce_category",
    "validate_entry_input",
]
