"""Use case to refresh the in-memory exchange rate table."""

from datetime import datetime, timedelta, timezone

from fintrack.application.ports.exchange_rates import ExchangeRateSourcePort
from fintrack.domain.errors import ExchangeRateError
from fintrack.domain.services.fx import ExchangeRateTable
from fintrack.infrastructure.logging.logger import get_app_logger

DEFAULT_REFRESH_INTERVAL = timedelta(hours=1)


class RefreshExchangeRatesUseCase:
    """Replace the rate table from a remote source.

    Failures are logged and leave the existing table (or the defaults) in
    place. There is no retry.
    """

    def __init__(
        self,
        source: ExchangeRateSourcePort,
        rate_table: ExchangeRateTable,
        logger=None,
        refresh_interval: timedelta = DEFAULT_REFRESH_INTERVAL,
    ) -> None:
        self._source = source
        self._rate_table = rate_table
        self._logger = logger or get_app_logger()
        self._refresh_interval = refresh_interval
        self._last_attempt_at: datetime | None = None

    def execute(self) -> bool:
        """Fetch and install new rates.

        Returns:
            bool: True when the table was replaced.
        """
        try:
            rates = self._source.fetch_rates()
        except ExchangeRateError as exc:
            self._logger.warning(
                f"Exchange rate refresh failed, keeping current rates: {exc}"
            )
            return False
        self._rate_table.replace(rates)
        self._logger.info(f"Exchange rates updated ({len(rates)} currencies)")
        return True

    def refresh_if_stale(self, now: datetime | None = None) -> bool:
        """Refresh only when the table is older than the interval.

        A failed attempt also waits a full interval before the next one.
        """
        current = now or datetime.now(timezone.utc)
        if (
            self._last_attempt_at is not None
            and current - self._last_attempt_at < self._refresh_interval
        ):
            return False
        if not self._rate_table.is_stale(self._refresh_interval, now=current):
            return False
        self._last_attempt_at = current
        return self.execute()


__all__ = ["RefreshExchangeRatesUseCase", "DEFAULT_REFRESH_INTERVAL"]
