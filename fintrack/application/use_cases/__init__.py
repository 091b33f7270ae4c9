"""Application use cases package."""

from .authenticate import AuthenticateUseCase
from .get_dashboard_summary import GetDashboardSummaryUseCase
from .get_net_worth_trend import GetNetWorthTrendUseCase
from .manage_entries import ManageEntriesUseCase
from .net_worth_history import NetWorthHistoryUseCase
from .record_net_worth_snapshot import RecordNetWorthSnapshotUseCase
from .refresh_exchange_rates import RefreshExchangeRatesUseCase

__all__ = [
    "AuthenticateUseCase",
    "GetDashboardSummaryUseCase",
    "GetNetWorthTrendUseCase",
    "ManageEntriesUseCase",
    "NetWorthHistoryUseCase",
    "RecordNetWorthSnapshotUseCase",
    "RefreshExchangeRatesUseCase",
]
