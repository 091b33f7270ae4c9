"""Mapping helpers between table rows and domain models."""

from datetime import date, datetime, timezone
from typing import Any

from fintrack.application.ports.table_gateway import Row
from fintrack.domain.constants import BASE_CURRENCY
from fintrack.domain.models import FinancialEntry, NetWorthRecord, UserRecord
from fintrack.utils.decimal_utils import coerce_decimal

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a timestamp from a datetime or an ISO 8601 string."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def parse_date(value: Any) -> date:
    """Parse a calendar date from a date, datetime or ISO string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def entry_from_row(row: Row) -> FinancialEntry:
    """Build a FinancialEntry from a table row."""
    return FinancialEntry(
        id=str(row["id"]),
        name=row["name"],
        category=row["category"],
        value=coerce_decimal(row["value"]),
        currency=row["currency"],
        last_updated=parse_timestamp(row.get("last_updated")) or EPOCH,
        comments=row.get("comments") or None,
        user_id=_optional_str(row.get("user_id")),
    )


def entry_to_row(entry: FinancialEntry) -> Row:
    """Return the table row for a FinancialEntry."""
    return {
        "id": entry.id,
        "name": entry.name,
        "category": entry.category,
        "value": entry.value,
        "currency": entry.currency,
        "last_updated": entry.last_updated,
        "comments": entry.comments,
        "user_id": entry.user_id,
    }


def record_from_row(row: Row) -> NetWorthRecord:
    """Build a NetWorthRecord from a table row."""
    return NetWorthRecord(
        id=_optional_str(row.get("id")),
        user_id=_optional_str(row.get("user_id")),
        date=parse_date(row["date"]),
        total_assets=coerce_decimal(row.get("total_assets")),
        total_debts=coerce_decimal(row.get("total_debts")),
        net_worth=coerce_decimal(row.get("net_worth")),
        base_currency=row.get("base_currency") or BASE_CURRENCY,
    )


def record_to_row(record: NetWorthRecord) -> Row:
    """Return the table row for a NetWorthRecord; the id is left to the backend."""
    row: Row = {
        "user_id": record.user_id,
        "date": record.date,
        "total_assets": record.total_assets,
        "total_debts": record.total_debts,
        "net_worth": record.net_worth,
        "base_currency": record.base_currency,
    }
    if record.id:
        row["id"] = record.id
    return row


def user_from_row(row: Row) -> UserRecord:
    """Build a UserRecord from a users row."""
    return UserRecord(
        id=str(row["id"]),
        email=row.get("email"),
        created_at=parse_timestamp(row.get("created_at")) or EPOCH,
        last_sign_in_at=parse_timestamp(row.get("last_sign_in_at")),
    )


def user_to_row(user: UserRecord) -> Row:
    """Return the users row for a UserRecord."""
    return {
        "id": user.id,
        "email": user.email,
        "created_at": user.created_at,
        "last_sign_in_at": user.last_sign_in_at,
    }


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


__all__ = [
    "parse_timestamp",
    "parse_date",
    "entry_from_row",
    "entry_to_row",
    "record_from_row",
    "record_to_row",
    "user_from_row",
    "user_to_row",
]
