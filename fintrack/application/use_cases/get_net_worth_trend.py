"""Use case to compute current net worth and its recorded trend."""

from fintrack.application.ports.repositories import (
    EntriesRepositoryPort,
    NetWorthHistoryRepositoryPort,
)
from fintrack.domain.models import NetWorthOverview
from fintrack.domain.services.finance import (
    build_net_worth_trend,
    compute_net_worth_summary,
)
from fintrack.domain.services.fx import ExchangeRateTable
from fintrack.infrastructure.logging.logger import get_app_logger


class GetNetWorthTrendUseCase:
    """Combine live totals with converted history snapshots."""

    def __init__(
        self,
        assets_repository: EntriesRepositoryPort,
        debts_repository: EntriesRepositoryPort,
        history_repository: NetWorthHistoryRepositoryPort,
        rate_table: ExchangeRateTable,
        logger=None,
    ) -> None:
        self._assets_repository = assets_repository
        self._debts_repository = debts_repository
        self._history_repository = history_repository
        self._rate_table = rate_table
        self._logger = logger or get_app_logger()

    def execute(self, target_currency: str) -> NetWorthOverview:
        """Return the current summary and trend in ``target_currency``."""
        rates = self._rate_table.rates
        summary = compute_net_worth_summary(
            self._assets_repository.list_entries(),
            self._debts_repository.list_entries(),
            rates,
            target_currency,
            self._logger,
        )
        trend = build_net_worth_trend(
            self._history_repository.list_records(),
            rates,
            target_currency,
            self._logger,
        )
        self._logger.info(
            f"Net worth trend computed with {len(trend.points)} points "
            f"in {target_currency}"
        )
        return NetWorthOverview(summary=summary, trend=trend)


__all__ = ["GetNetWorthTrendUseCase"]
