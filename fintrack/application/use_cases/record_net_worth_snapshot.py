"""Use case to capture the current net worth as a history snapshot."""

from collections.abc import Callable
from datetime import date

from fintrack.application.ports.repositories import (
    EntriesRepositoryPort,
    NetWorthHistoryRepositoryPort,
)
from fintrack.domain.constants import BASE_CURRENCY
from fintrack.domain.errors import AuthenticationRequiredError
from fintrack.domain.models import NetWorthRecord
from fintrack.domain.services.finance import compute_net_worth_summary
from fintrack.domain.services.fx import ExchangeRateTable
from fintrack.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class RecordNetWorthSnapshotUseCase:
    """Compute today's totals and append them to the history."""

    def __init__(
        self,
        assets_repository: EntriesRepositoryPort,
        debts_repository: EntriesRepositoryPort,
        history_repository: NetWorthHistoryRepositoryPort,
        rate_table: ExchangeRateTable,
        logger=None,
        usage_logger=None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Port providing the user's assets.
            debts_repository: Port providing the user's debts.
            history_repository: Port receiving the snapshot.
            rate_table: Rate table used for conversion.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
            today: Optional callable returning the snapshot date.
        """
        self._assets_repository = assets_repository
        self._debts_repository = debts_repository
        self._history_repository = history_repository
        self._rate_table = rate_table
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._today = today or date.today

    def execute(
        self,
        user_id: str | None,
        base_currency: str = BASE_CURRENCY,
    ) -> NetWorthRecord | None:
        """Record a snapshot in ``base_currency``.

        Args:
            user_id: Authenticated owner id.
            base_currency: Currency the snapshot totals are stored in.

        Returns:
            NetWorthRecord | None: The stored snapshot.

        Raises:
            AuthenticationRequiredError: If no user is signed in.
        """
        if not user_id:
            raise AuthenticationRequiredError(
                "Please log in to record net worth"
            )
        summary = compute_net_worth_summary(
            self._assets_repository.list_entries(),
            self._debts_repository.list_entries(),
            self._rate_table.rates,
            base_currency,
            self._logger,
        )
        record = NetWorthRecord(
            id=None,
            user_id=user_id,
            date=self._today(),
            total_assets=summary.asset_total,
            total_debts=summary.debt_total,
            net_worth=summary.net_worth,
            base_currency=base_currency,
        )
        stored = self._history_repository.add_record(record)
        self._logger.info(
            f"Net worth snapshot recorded: assets={summary.asset_total}, "
            f"debts={summary.debt_total}, currency={base_currency}"
        )
        self._usage_logger.info(f"user={user_id} recorded net worth snapshot")
        return stored


__all__ = ["RecordNetWorthSnapshotUseCase"]
