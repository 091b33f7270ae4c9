"""Port for fetching exchange rates."""

from decimal import Decimal
from typing import Protocol


class ExchangeRateSourcePort(Protocol):
    """Port exposing a remote USD-relative rate table."""

    def fetch_rates(self) -> dict[str, Decimal]:
        """Return rates keyed by currency code.

        Raises:
            ExchangeRateError: If the rates cannot be fetched or parsed.
        """


__all__ = ["ExchangeRateSourcePort"]
