"""Tests for finance aggregate services."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from fintrack.domain.models import FinancialEntry, NetWorthRecord
from fintrack.domain.services.finance import (
    build_net_worth_trend,
    compute_category_breakdown,
    compute_dashboard_summary,
    compute_net_worth_summary,
    filter_entries,
    rank_entries,
)
from fintrack.domain.services.fx import convert_amount

RATES = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "RON": Decimal("4.56"),
}
UPDATED = datetime(2024, 3, 1, tzinfo=timezone.utc)


def _entry(
    entry_id: str,
    category: str,
    value: str,
    currency: str = "USD",
    name: str | None = None,
    comments: str | None = None,
) -> FinancialEntry:
    return FinancialEntry(
        id=entry_id,
        name=name or entry_id,
        category=category,
        value=Decimal(value),
        currency=currency,
        last_updated=UPDATED,
        comments=comments,
    )


def _record(day: date, net_worth: str, currency: str = "USD") -> NetWorthRecord:
    return NetWorthRecord(
        id=f"nw-{day.isoformat()}",
        user_id="user-1",
        date=day,
        total_assets=Decimal(net_worth),
        total_debts=Decimal("0"),
        net_worth=Decimal(net_worth),
        base_currency=currency,
    )


def test_breakdown_converts_each_entry_before_summing() -> None:
    """Mixed currencies in a category are converted to the target first."""
    entries = [
        _entry("wallet", "cash", "100", "USD"),
        _entry("euro-cash", "cash", "50", "EUR"),
    ]

    breakdown = compute_category_breakdown(entries, RATES, "USD")

    assert breakdown.currency_code == "USD"
    assert breakdown.total == Decimal("154.35")
    assert [item.category for item in breakdown.categories] == ["cash"]
    assert breakdown.categories[0].amount == Decimal("154.35")
    assert breakdown.categories[0].share == Decimal("100")


def test_breakdown_orders_largest_first_and_sums_to_total() -> None:
    entries = [
        _entry("car", "vehicle", "300"),
        _entry("house", "real_estate", "1000"),
        _entry("misc", "other", "300"),
        _entry("savings", "savings_account", "456", "RON"),
    ]

    breakdown = compute_category_breakdown(entries, RATES, "USD")

    assert [item.category for item in breakdown.categories] == [
        "real_estate",
        "other",
        "vehicle",
        "savings_account",
    ]
    assert breakdown.total == Decimal("1700.00")
    assert sum(item.amount for item in breakdown.categories) == breakdown.total
    shares = sum(item.share for item in breakdown.categories)
    assert abs(shares - Decimal("100")) < Decimal("0.0001")


PARTITION_ENTRIES = [
    _entry("wallet", "cash", "100.10", "USD"),
    _entry("euro-cash", "cash", "33.33", "EUR"),
    _entry("lei-cash", "cash", "77.77", "RON"),
    _entry("flat", "real_estate", "250000", "EUR"),
    _entry("land", "real_estate", "91234.56", "RON"),
    _entry("etf", "investment", "1.01", "EUR"),
    _entry("stocks", "investment", "999.99", "USD"),
    _entry("bond", "investment", "12.34", "RON"),
    _entry("car", "vehicle", "0.01", "RON"),
]


@pytest.mark.parametrize("target", ["USD", "EUR", "RON"])
def test_breakdown_category_equals_sum_of_converted_entries(target) -> None:
    """Each category total is the sum of its entries converted one by one."""
    breakdown = compute_category_breakdown(PARTITION_ENTRIES, RATES, target)

    by_category = {item.category: item.amount for item in breakdown.categories}
    assert set(by_category) == {
        "cash",
        "real_estate",
        "investment",
        "vehicle",
    }
    for category, amount in by_category.items():
        expected = sum(
            (
                convert_amount(entry.value, entry.currency, target, RATES)
                for entry in PARTITION_ENTRIES
                if entry.category == category
            ),
            Decimal("0"),
        )
        assert amount == expected
    assert breakdown.total == sum(by_category.values(), Decimal("0"))


def test_breakdown_of_no_entries_is_empty() -> None:
    breakdown = compute_category_breakdown([], RATES, "EUR")

    assert breakdown.total == Decimal("0")
    assert breakdown.categories == []


def test_net_worth_summary_subtracts_debts() -> None:
    assets = [
        _entry("account", "bank_deposit", "1000", "USD"),
        _entry("cash", "cash", "92", "EUR"),
    ]
    debts = [_entry("card", "credit_card", "456", "RON")]

    summary = compute_net_worth_summary(assets, debts, RATES, "USD")

    assert summary.asset_total == Decimal("1100.00")
    assert summary.debt_total == Decimal("100.00")
    assert summary.net_worth == Decimal("1000.00")
    assert summary.currency_code == "USD"


def test_net_worth_summary_can_be_negative() -> None:
    summary = compute_net_worth_summary(
        [],
        [_entry("loan", "student_loan", "10")],
        RATES,
        "USD",
    )

    assert summary.net_worth == Decimal("-10")


def test_rank_entries_uses_converted_value() -> None:
    """A smaller nominal value in a stronger currency can rank higher."""
    entries = [
        _entry("ron", "cash", "400", "RON"),
        _entry("usd", "cash", "100", "USD"),
        _entry("eur", "cash", "95", "EUR"),
    ]

    ranked = rank_entries(entries, RATES, "USD", limit=2)

    assert [item.entry.id for item in ranked] == ["eur", "usd"]
    assert ranked[0].converted_value == Decimal("103.26")


def test_dashboard_summary_keeps_top_three() -> None:
    assets = [
        _entry(f"asset-{index}", "cash", str(index * 10))
        for index in range(1, 6)
    ]
    debts = [_entry("mortgage", "mortgage", "200")]

    dashboard = compute_dashboard_summary(assets, debts, RATES, "USD")

    assert dashboard.asset_count == 5
    assert dashboard.debt_count == 1
    assert [item.entry.id for item in dashboard.top_assets] == [
        "asset-5",
        "asset-4",
        "asset-3",
    ]
    assert dashboard.summary.asset_total == Decimal("150")
    assert dashboard.summary.net_worth == Decimal("-50")
    assert dashboard.debt_breakdown.categories[0].category == "mortgage"


def test_trend_is_sorted_by_date_and_converted() -> None:
    records = [
        _record(date(2024, 3, 1), "300"),
        _record(date(2024, 1, 1), "100"),
        _record(date(2024, 2, 1), "92", "EUR"),
    ]

    trend = build_net_worth_trend(records, RATES, "USD")

    assert trend.currency_code == "USD"
    assert [point.label for point in trend.points] == [
        "Jan 2024",
        "Feb 2024",
        "Mar 2024",
    ]
    assert [point.net_worth for point in trend.points] == [
        Decimal("100"),
        Decimal("100.00"),
        Decimal("300"),
    ]


def test_filter_entries_matches_formatted_category_and_comments() -> None:
    entries = [
        _entry("a", "bank_deposit", "1", name="Main account"),
        _entry("b", "cash", "1", "EUR", name="Wallet", comments="Travel money"),
        _entry("c", "investment", "1", name="Index fund"),
    ]

    assert [item.id for item in filter_entries(entries, "bank dep")] == ["a"]
    assert [item.id for item in filter_entries(entries, "TRAVEL")] == ["b"]
    assert [item.id for item in filter_entries(entries, "eur")] == ["b"]
    assert [item.id for item in filter_entries(entries, "fund")] == ["c"]
    assert filter_entries(entries, "  ") == entries
    assert filter_entries(entries, None) == entries
    assert filter_entries(entries, "nothing") == []
