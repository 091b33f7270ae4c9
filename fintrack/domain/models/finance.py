"""Domain models for tracked entries and financial aggregates."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class EntryKind(str, Enum):
    """Kind of financial entry, mapped to its remote table."""

    ASSET = "asset"
    DEBT = "debt"

    @property
    def table_name(self) -> str:
        """Return the remote table holding entries of this kind."""
        return "assets" if self is EntryKind.ASSET else "debts"

    @property
    def label(self) -> str:
        """Return the singular display label."""
        return "Asset" if self is EntryKind.ASSET else "Debt"

    @property
    def plural_label(self) -> str:
        """Return the plural display label."""
        return "Assets" if self is EntryKind.ASSET else "Debts"


@dataclass(frozen=True)
class Currency:
    """Currency code with its display symbol."""

    code: str
    symbol: str


@dataclass(frozen=True)
class FinancialEntry:
    """A single asset or debt owned by one user.

    Attributes:
        id: Remote row identifier.
        name: User-facing label.
        category: Category drawn from the kind's category set.
        value: Positive amount in ``currency``.
        currency: ISO currency code the value is stored in.
        last_updated: Timestamp of the last create or edit.
        comments: Optional free-form notes.
        user_id: Owner identity.
    """

    id: str
    name: str
    category: str
    value: Decimal
    currency: str
    last_updated: datetime
    comments: str | None = None
    user_id: str | None = None


@dataclass(frozen=True)
class EntryDraft:
    """Validated entry fields ready to be written."""

    name: str
    category: str
    value: Decimal
    currency: str
    comments: str | None = None


@dataclass(frozen=True)
class NetWorthRecord:
    """Point-in-time net worth snapshot."""

    id: str | None
    user_id: str | None
    date: date
    total_assets: Decimal
    total_debts: Decimal
    net_worth: Decimal
    base_currency: str


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of converted asset values.
        debt_total: Sum of converted debt values.
        net_worth: Assets minus debts.
        currency_code: Currency the totals are expressed in.
    """

    asset_total: Decimal
    debt_total: Decimal
    net_worth: Decimal
    currency_code: str


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a given category."""

    category: str
    amount: Decimal
    share: Decimal = Decimal("0")


@dataclass(frozen=True)
class CategoryBreakdown:
    """Breakdown of converted amounts by category, largest first."""

    currency_code: str
    total: Decimal
    categories: list[CategoryAmount] = field(default_factory=list)


@dataclass(frozen=True)
class RankedEntry:
    """Entry paired with its value in the display currency."""

    entry: FinancialEntry
    converted_value: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Everything the dashboard view renders."""

    summary: NetWorthSummary
    asset_breakdown: CategoryBreakdown
    debt_breakdown: CategoryBreakdown
    top_assets: list[RankedEntry]
    top_debts: list[RankedEntry]
    asset_count: int
    debt_count: int


@dataclass(frozen=True)
class TrendPoint:
    """Net worth at one snapshot date in the display currency."""

    date: date
    label: str
    net_worth: Decimal


@dataclass(frozen=True)
class NetWorthTrend:
    """Chronological net worth history in the display currency."""

    currency_code: str
    points: list[TrendPoint]


@dataclass(frozen=True)
class NetWorthOverview:
    """Current net worth together with its recorded history."""

    summary: NetWorthSummary
    trend: NetWorthTrend


__all__ = [
    "EntryKind",
    "Currency",
    "FinancialEntry",
    "EntryDraft",
    "NetWorthRecord",
    "NetWorthSummary",
    "CategoryAmount",
    "CategoryBreakdown",
    "RankedEntry",
    "DashboardSummary",
    "TrendPoint",
    "NetWorthTrend",
    "NetWorthOverview",
]
