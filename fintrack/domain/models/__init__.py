"""Domain models package."""

from .auth import AuthIdentity, AuthResult, AuthSession, UserRecord
from .finance import (
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
)

__all__ = [
    "AuthIdentity",
    "AuthResult",
    "AuthSession",
    "UserRecord",
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
]
