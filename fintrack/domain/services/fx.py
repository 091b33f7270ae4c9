"""Currency conversion against a USD-relative rate table."""

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from logging import Logger

from fintrack.domain.constants import BASE_CURRENCY, DEFAULT_EXCHANGE_RATES
from fintrack.domain.errors import ExchangeRateError
from fintrack.utils.decimal_utils import coerce_decimal, round_money


def convert_amount(
    amount,
    from_currency: str,
    to_currency: str,
    rates: Mapping[str, Decimal],
    logger: Logger | None = None,
) -> Decimal:
    """Convert an amount between two currencies.

    Both rates are relative to USD, so the amount goes through USD first:
    ``amount / rates[from] * rates[to]``, rounded to two decimals.
    Unknown currencies fall back to a rate of 1.

    Args:
        amount: Amount in ``from_currency``.
        from_currency: Source currency code.
        to_currency: Target currency code.
        rates: Mapping of currency code to USD-relative rate.
        logger: Optional logger used for missing-rate warnings.

    Returns:
        Decimal: Converted amount; the unrounded input when the codes match.
    """
    value = coerce_decimal(amount)
    if from_currency == to_currency:
        return value
    from_rate = _resolve_rate(rates, from_currency, logger)
    to_rate = _resolve_rate(rates, to_currency, logger)
    return round_money(value / from_rate * to_rate)


def _resolve_rate(
    rates: Mapping[str, Decimal],
    currency: str,
    logger: Logger | None,
) -> Decimal:
    rate = rates.get(currency)
    if not rate:
        if logger is not None:
            logger.warning(f"Missing FX rate for {currency}; using 1")
        return Decimal("1")
    return coerce_decimal(rate)


def parse_rates_payload(
    payload,
    logger: Logger | None = None,
) -> dict[str, Decimal]:
    """Extract a rate table from a rate API JSON body.

    Args:
        payload: Decoded JSON body expected to hold a ``rates`` mapping.
        logger: Optional logger used for skipped entries.

    Returns:
        dict[str, Decimal]: Positive rates keyed by upper-case code.

    Raises:
        ExchangeRateError: If the body has no usable ``rates`` mapping.
    """
    if not isinstance(payload, Mapping):
        raise ExchangeRateError("Rate payload is not a JSON object")
    raw_rates = payload.get("rates")
    if not isinstance(raw_rates, Mapping) or not raw_rates:
        raise ExchangeRateError("Rate payload has no rates mapping")

    rates: dict[str, Decimal] = {}
    for code, raw_value in raw_rates.items():
        if isinstance(raw_value, bool) or raw_value is None:
            continue
        try:
            value = Decimal(str(raw_value))
        except InvalidOperation:
            if logger is not None:
                logger.warning(f"Skipping non-numeric FX rate for {code}")
            continue
        if not value.is_finite() or value <= 0:
            if logger is not None:
                logger.warning(f"Skipping non-positive FX rate for {code}")
            continue
        rates[str(code).upper()] = value
    if not rates:
        raise ExchangeRateError("Rate payload contains no valid rates")
    return rates


class ExchangeRateTable:
    """Mutable USD-relative rate table, replaced wholesale on refresh."""

    def __init__(
        self,
        rates: Mapping[str, Decimal] | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._rates = dict(rates or DEFAULT_EXCHANGE_RATES)
        self._refreshed_at: datetime | None = None
        self._logger = logger

    @property
    def rates(self) -> dict[str, Decimal]:
        """Return a copy of the current rates."""
        return dict(self._rates)

    @property
    def refreshed_at(self) -> datetime | None:
        """Return when rates were last replaced from a remote source."""
        return self._refreshed_at

    def replace(
        self,
        rates: Mapping[str, Decimal],
        refreshed_at: datetime | None = None,
    ) -> None:
        """Swap in a new table with the base currency pinned to 1."""
        new_rates = {
            code.upper(): coerce_decimal(value)
            for code, value in rates.items()
        }
        new_rates[BASE_CURRENCY] = Decimal("1")
        self._rates = new_rates
        self._refreshed_at = refreshed_at or datetime.now(timezone.utc)

    def convert(self, amount, from_currency: str, to_currency: str) -> Decimal:
        """Convert ``amount`` using the current table."""
        return convert_amount(
            amount,
            from_currency,
            to_currency,
            self._rates,
            self._logger,
        )

    def is_stale(
        self,
        max_age: timedelta,
        now: datetime | None = None,
    ) -> bool:
        """Return True when the table was never refreshed or is too old."""
        if self._refreshed_at is None:
            return True
        current = now or datetime.now(timezone.utc)
        return current - self._refreshed_at >= max_age

    def __contains__(self, currency: str) -> bool:
        return currency in self._rates


__all__ = ["convert_amount", "parse_rates_payload", "ExchangeRateTable"]
