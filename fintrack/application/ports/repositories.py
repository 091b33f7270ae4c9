"""Ports for typed access to entries, net worth history and users."""

from typing import Protocol

from fintrack.domain.models import (
    EntryKind,
    FinancialEntry,
    NetWorthRecord,
    UserRecord,
)


class EntriesRepositoryPort(Protocol):
    """Port exposing CRUD on assets or debts."""

    kind: EntryKind

    def list_entries(self) -> list[FinancialEntry]:
        """Return entries ordered by name."""

    def add_entry(self, entry: FinancialEntry) -> FinancialEntry | None:
        """Insert an entry and return it as stored."""

    def update_entry(self, entry: FinancialEntry) -> FinancialEntry | None:
        """Overwrite an entry and return it as stored."""

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry."""


class NetWorthHistoryRepositoryPort(Protocol):
    """Port exposing the append-only net worth history."""

    def list_records(self, limit: int | None = None) -> list[NetWorthRecord]:
        """Return snapshots, newest first."""

    def add_record(self, record: NetWorthRecord) -> NetWorthRecord | None:
        """Append a snapshot and return it as stored."""


class UsersRepositoryPort(Protocol):
    """Port exposing the mirrored users table."""

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the mirrored user row, if any."""

    def add_user(self, user: UserRecord) -> None:
        """Insert a mirrored user row."""


__all__ = [
    "EntriesRepositoryPort",
    "NetWorthHistoryRepositoryPort",
    "UsersRepositoryPort",
]
