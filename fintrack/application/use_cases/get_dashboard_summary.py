"""Use case to compute dashboard totals, allocations and rankings."""

from fintrack.application.ports.repositories import EntriesRepositoryPort
from fintrack.domain.models import DashboardSummary
from fintrack.domain.services.finance import compute_dashboard_summary
from fintrack.domain.services.fx import ExchangeRateTable
from fintrack.infrastructure.logging.logger import get_app_logger


class GetDashboardSummaryUseCase:
    """Fetch assets and debts and aggregate them in a display currency."""

    def __init__(
        self,
        assets_repository: EntriesRepositoryPort,
        debts_repository: EntriesRepositoryPort,
        rate_table: ExchangeRateTable,
        logger=None,
        top_n: int = 3,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Port providing the user's assets.
            debts_repository: Port providing the user's debts.
            rate_table: Rate table used for conversion.
            logger: Optional logger compatible with logging.Logger-like API.
            top_n: Number of top assets and debts to rank.
        """
        self._assets_repository = assets_repository
        self._debts_repository = debts_repository
        self._rate_table = rate_table
        self._logger = logger or get_app_logger()
        self._top_n = top_n

    def execute(self, target_currency: str) -> DashboardSummary:
        """Return the dashboard aggregates in ``target_currency``."""
        assets = self._assets_repository.list_entries()
        debts = self._debts_repository.list_entries()
        dashboard = compute_dashboard_summary(
            assets,
            debts,
            self._rate_table.rates,
            target_currency,
            top_n=self._top_n,
            logger=self._logger,
        )
        self._logger.info(
            f"Dashboard computed: assets={dashboard.summary.asset_total}, "
            f"debts={dashboard.summary.debt_total}, "
            f"currency={target_currency}"
        )
        return dashboard


__all__ = ["GetDashboardSummaryUseCase"]
