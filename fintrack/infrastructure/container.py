"""Composition root for wiring infrastructure adapters."""

from datetime import timedelta

from supabase import Client

from fintrack.application.ports.auth import AuthGatewayPort
from fintrack.application.ports.exchange_rates import ExchangeRateSourcePort
from fintrack.application.use_cases.authenticate import AuthenticateUseCase
from fintrack.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from fintrack.application.use_cases.get_net_worth_trend import (
    GetNetWorthTrendUseCase,
)
from fintrack.application.use_cases.manage_entries import ManageEntriesUseCase
from fintrack.application.use_cases.net_worth_history import (
    NetWorthHistoryUseCase,
)
from fintrack.application.use_cases.record_net_worth_snapshot import (
    RecordNetWorthSnapshotUseCase,
)
from fintrack.application.use_cases.refresh_exchange_rates import (
    RefreshExchangeRatesUseCase,
)
from fintrack.domain.models import EntryKind
from fintrack.domain.services.fx import ExchangeRateTable
from fintrack.infrastructure.exchange_rate_api import (
    RequestsExchangeRateSource,
)
from fintrack.infrastructure.logging.logger import get_app_logger
from fintrack.infrastructure.repositories import (
    TableEntriesRepository,
    TableNetWorthHistoryRepository,
    TableUsersRepository,
)
from fintrack.infrastructure.settings import FinTrackSettings
from fintrack.infrastructure.supabase_auth import SupabaseAuthGateway
from fintrack.infrastructure.supabase_client import create_supabase_client
from fintrack.infrastructure.table_gateway_factory import (
    create_table_gateway,
)


def build_settings() -> FinTrackSettings:
    """Return settings read from the environment."""
    return FinTrackSettings.from_env()


def build_supabase_client(settings: FinTrackSettings | None = None) -> Client:
    """Return a fresh Supabase client for one session."""
    return create_supabase_client(settings or build_settings())


def build_auth_gateway(client: Client) -> AuthGatewayPort:
    """Return the auth gateway bound to a session client."""
    return SupabaseAuthGateway(client)


def build_authenticate_use_case(
    client: Client,
    settings: FinTrackSettings | None = None,
) -> AuthenticateUseCase:
    """Return the authentication use case for a session client."""
    resolved = settings or build_settings()
    users_gateway = create_table_gateway(
        "users",
        resolved,
        supabase_client=client,
    )
    return AuthenticateUseCase(
        auth_gateway=build_auth_gateway(client),
        users_repository=TableUsersRepository(users_gateway),
        logger=get_app_logger(),
    )


def build_entries_repository(
    kind: EntryKind,
    client: Client | None,
    owner_id: str | None,
    settings: FinTrackSettings | None = None,
) -> TableEntriesRepository:
    """Return the assets or debts repository."""
    gateway = create_table_gateway(
        kind.table_name,
        settings or build_settings(),
        supabase_client=client,
        owner_id=owner_id,
    )
    return TableEntriesRepository(gateway, kind)


def build_history_repository(
    client: Client | None,
    owner_id: str | None,
    settings: FinTrackSettings | None = None,
) -> TableNetWorthHistoryRepository:
    """Return the net worth history repository."""
    gateway = create_table_gateway(
        "net_worth_history",
        settings or build_settings(),
        supabase_client=client,
        owner_id=owner_id,
    )
    return TableNetWorthHistoryRepository(gateway)


def build_manage_entries_use_case(
    kind: EntryKind,
    client: Client | None,
    owner_id: str | None,
    settings: FinTrackSettings | None = None,
) -> ManageEntriesUseCase:
    """Return CRUD for assets or debts."""
    return ManageEntriesUseCase(
        build_entries_repository(kind, client, owner_id, settings),
        logger=get_app_logger(),
    )


def build_net_worth_history_use_case(
    client: Client | None,
    owner_id: str | None,
    settings: FinTrackSettings | None = None,
) -> NetWorthHistoryUseCase:
    """Return access to the net worth history."""
    return NetWorthHistoryUseCase(
        build_history_repository(client, owner_id, settings),
        logger=get_app_logger(),
    )


def build_dashboard_use_case(
    client: Client | None,
    owner_id: str | None,
    rate_table: ExchangeRateTable,
    settings: FinTrackSettings | None = None,
) -> GetDashboardSummaryUseCase:
    """Return the dashboard aggregation use case."""
    resolved = settings or build_settings()
    return GetDashboardSummaryUseCase(
        build_entries_repository(EntryKind.ASSET, client, owner_id, resolved),
        build_entries_repository(EntryKind.DEBT, client, owner_id, resolved),
        rate_table,
        logger=get_app_logger(),
    )


def build_net_worth_trend_use_case(
    client: Client | None,
    owner_id: str | None,
    rate_table: ExchangeRateTable,
    settings: FinTrackSettings | None = None,
) -> GetNetWorthTrendUseCase:
    """Return the net worth trend use case."""
    resolved = settings or build_settings()
    return GetNetWorthTrendUseCase(
        build_entries_repository(EntryKind.ASSET, client, owner_id, resolved),
        build_entries_repository(EntryKind.DEBT, client, owner_id, resolved),
        build_history_repository(client, owner_id, resolved),
        rate_table,
        logger=get_app_logger(),
    )


def build_snapshot_use_case(
    client: Client | None,
    owner_id: str | None,
    rate_table: ExchangeRateTable,
    settings: FinTrackSettings | None = None,
) -> RecordNetWorthSnapshotUseCase:
    """Return the snapshot recording use case."""
    resolved = settings or build_settings()
    return RecordNetWorthSnapshotUseCase(
        build_entries_repository(EntryKind.ASSET, client, owner_id, resolved),
        build_entries_repository(EntryKind.DEBT, client, owner_id, resolved),
        build_history_repository(client, owner_id, resolved),
        rate_table,
        logger=get_app_logger(),
    )


def build_exchange_rate_source(
    settings: FinTrackSettings | None = None,
) -> ExchangeRateSourcePort:
    """Return the configured rate API source."""
    resolved = settings or build_settings()
    return RequestsExchangeRateSource(
        url=resolved.exchange_rate_api_url,
        timeout=resolved.exchange_rate_timeout,
        logger=get_app_logger(),
    )


def build_rate_refresher(
    rate_table: ExchangeRateTable,
    settings: FinTrackSettings | None = None,
) -> RefreshExchangeRatesUseCase:
    """Return the rate refresh use case bound to ``rate_table``."""
    resolved = settings or build_settings()
    return RefreshExchangeRatesUseCase(
        build_exchange_rate_source(resolved),
        rate_table,
        logger=get_app_logger(),
        refresh_interval=timedelta(
            seconds=resolved.exchange_rate_refresh_seconds
        ),
    )


__all__ = [
    "build_settings",
    "build_supabase_client",
    "build_auth_gateway",
    "build_authenticate_use_case",
    "build_entries_repository",
    "build_history_repository",
    "build_manage_entries_use_case",
    "build_net_worth_history_use_case",
    "build_dashboard_use_case",
    "build_net_worth_trend_use_case",
    "build_snapshot_use_case",
    "build_exchange_rate_source",
    "build_rate_refresher",
]
