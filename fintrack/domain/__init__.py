"""Domain package for business rules and core models."""

from .models import (
    AuthIdentity,
    AuthResult,
    AuthSession,
    CategoryAmount,
    CategoryBreakdown,
    Currency,
    DashboardSummary,
    EntryDraft,
    EntryKind,
    FinancialEntry,
    NetWorthRecord,
    NetWorthOverview,
    NetWorthSummary,
    NetWorthTrend,
    RankedEntry,
    TrendPoint,
    UserRecord,
)
from .constants import (
    ASSET_CATEGORIES,
    AVAILABLE_CURRENCIES,
    BASE_CURRENCY,
    DEBT_CATEGORIES,
    DEFAULT_EXCHANGE_RATES,
)
from .errors import (
    AuthenticationRequiredError,
    DomainError,
    ExchangeRateError,
    ValidationError,
)

__all__ = [
    "AuthIdentity",
    "AuthResult",
    "AuthSession",
    "CategoryAmount",
    "CategoryBreakdown",
    "Currency",
    "DashboardSummary",
    "EntryDraft",
    "EntryKind",
    "FinancialEntry",
    "NetWorthRecord",
    "NetWorthOverview",
    "NetWorthSummary",
    "NetWorthTrend",
    "RankedEntry",
    "TrendPoint",
    "UserRecord",
    "ASSET_CATEGORIES",
    "AVAILABLE_CURRENCIES",
    "BASE_CURRENCY",
    "DEBT_CATEGORIES",
    "DEFAULT_EXCHANGE_RATES",
    "AuthenticationRequiredError",
    "DomainError",
    "ExchangeRateError",
    "ValidationError",
]
