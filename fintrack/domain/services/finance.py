"""Domain services for finance aggregates."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from logging import Logger

from fintrack.domain.constants import BASE_CURRENCY
from fintrack.domain.models import (
    CategoryAmount,
    CategoryBreakdown,
    DashboardSummary,
    FinancialEntry,
    NetWorthRecord,
    NetWorthSummary,
    NetWorthTrend,
    RankedEntry,
    TrendPoint,
)
from fintrack.domain.services.formatting import format_category_name
from fintrack.domain.services.fx import convert_amount


def compute_category_breakdown(
    entries: Iterable[FinancialEntry],
    rates: Mapping[str, Decimal],
    target_currency: str,
    logger: Logger | None = None,
) -> CategoryBreakdown:
    """Sum converted entry values by category.

    Each entry is converted to ``target_currency`` on its own before being
    added, so a category total always equals the sum of its entries'
    converted values.

    Args:
        entries: Assets or debts to aggregate.
        rates: USD-relative rate table.
        target_currency: Display currency code.
        logger: Optional logger used for missing-rate warnings.

    Returns:
        CategoryBreakdown: Category totals, largest first.
    """
    totals: dict[str, Decimal] = {}
    for entry in entries:
        converted = convert_amount(
            entry.value,
            entry.currency,
            target_currency,
            rates,
            logger,
        )
        totals[entry.category] = (
            totals.get(entry.category, Decimal("0")) + converted
        )

    total = sum(totals.values(), Decimal("0"))
    categories = [
        CategoryAmount(
            category=category,
            amount=amount,
            share=_share(amount, total),
        )
        for category, amount in sorted(
            totals.items(),
            key=lambda item: (-item[1], item[0]),
        )
    ]
    return CategoryBreakdown(
        currency_code=target_currency,
        total=total,
        categories=categories,
    )


def compute_net_worth_summary(
    assets: Iterable[FinancialEntry],
    debts: Iterable[FinancialEntry],
    rates: Mapping[str, Decimal],
    target_currency: str,
    logger: Logger | None = None,
) -> NetWorthSummary:
    """Compute asset and debt totals and their difference.

    Args:
        assets: Asset entries.
        debts: Debt entries.
        rates: USD-relative rate table.
        target_currency: Display currency code.
        logger: Optional logger used for missing-rate warnings.

    Returns:
        NetWorthSummary: Totals in ``target_currency``.
    """
    asset_total = _converted_total(assets, rates, target_currency, logger)
    debt_total = _converted_total(debts, rates, target_currency, logger)
    return NetWorthSummary(
        asset_total=asset_total,
        debt_total=debt_total,
        net_worth=asset_total - debt_total,
        currency_code=target_currency,
    )


def rank_entries(
    entries: Iterable[FinancialEntry],
    rates: Mapping[str, Decimal],
    target_currency: str,
    limit: int | None = None,
    logger: Logger | None = None,
) -> list[RankedEntry]:
    """Return entries ordered by converted value, largest first."""
    ranked = [
        RankedEntry(
            entry=entry,
            converted_value=convert_amount(
                entry.value,
                entry.currency,
                target_currency,
                rates,
                logger,
            ),
        )
        for entry in entries
    ]
    ranked.sort(key=lambda item: item.converted_value, reverse=True)
    if limit is not None:
        return ranked[:limit]
    return ranked


def compute_dashboard_summary(
    assets: list[FinancialEntry],
    debts: list[FinancialEntry],
    rates: Mapping[str, Decimal],
    target_currency: str,
    top_n: int = 3,
    logger: Logger | None = None,
) -> DashboardSummary:
    """Build every aggregate rendered on the dashboard.

    Args:
        assets: Asset entries.
        debts: Debt entries.
        rates: USD-relative rate table.
        target_currency: Display currency code.
        top_n: Number of top assets and debts to keep.
        logger: Optional logger used for missing-rate warnings.

    Returns:
        DashboardSummary: Totals, breakdowns and rankings.
    """
    asset_breakdown = compute_category_breakdown(
        assets, rates, target_currency, logger
    )
    debt_breakdown = compute_category_breakdown(
        debts, rates, target_currency, logger
    )
    summary = NetWorthSummary(
        asset_total=asset_breakdown.total,
        debt_total=debt_breakdown.total,
        net_worth=asset_breakdown.total - debt_breakdown.total,
        currency_code=target_currency,
    )
    return DashboardSummary(
        summary=summary,
        asset_breakdown=asset_breakdown,
        debt_breakdown=debt_breakdown,
        top_assets=rank_entries(
            assets, rates, target_currency, top_n, logger
        ),
        top_debts=rank_entries(
            debts, rates, target_currency, top_n, logger
        ),
        asset_count=len(assets),
        debt_count=len(debts),
    )


def build_net_worth_trend(
    records: Iterable[NetWorthRecord],
    rates: Mapping[str, Decimal],
    target_currency: str,
    logger: Logger | None = None,
) -> NetWorthTrend:
    """Convert snapshots to the display currency in date order.

    Args:
        records: Net worth snapshots in any order.
        rates: USD-relative rate table.
        target_currency: Display currency code.
        logger: Optional logger used for missing-rate warnings.

    Returns:
        NetWorthTrend: Points ordered from oldest to newest.
    """
    points = [
        TrendPoint(
            date=record.date,
            label=record.date.strftime("%b %Y"),
            net_worth=convert_amount(
                record.net_worth,
                record.base_currency or BASE_CURRENCY,
                target_currency,
                rates,
                logger,
            ),
        )
        for record in sorted(records, key=lambda item: item.date)
    ]
    return NetWorthTrend(currency_code=target_currency, points=points)


def filter_entries(
    entries: Iterable[FinancialEntry],
    query: str | None,
) -> list[FinancialEntry]:
    """Case-insensitive search over name, category, currency and comments."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(entries)
    matches = []
    for entry in entries:
        haystack = (
            entry.name,
            format_category_name(entry.category),
            entry.currency,
            entry.comments or "",
        )
        if any(needle in field.lower() for field in haystack):
            matches.append(entry)
    return matches


def _converted_total(
    entries: Iterable[FinancialEntry],
    rates: Mapping[str, Decimal],
    target_currency: str,
    logger: Logger | None,
) -> Decimal:
    return sum(
        (
            convert_amount(
                entry.value,
                entry.currency,
                target_currency,
                rates,
                logger,
            )
            for entry in entries
        ),
        Decimal("0"),
    )


def _share(amount: Decimal, total: Decimal) -> Decimal:
    if not total:
        return Decimal("0")
    return amount / total * Decimal("100")


__all__ = [
    "compute_category_breakdown",
    "compute_net_worth_summary",
    "rank_entries",
    "compute_dashboard_summary",
    "build_net_worth_trend",
    "filter_entries",
]
