"""Typed repositories composed over a table gateway."""

from fintrack.application.ports.repositories import (
    EntriesRepositoryPort,
    NetWorthHistoryRepositoryPort,
    UsersRepositoryPort,
)
from fintrack.application.ports.table_gateway import TableGatewayPort
from fintrack.domain.models import (
    EntryKind,
    FinancialEntry,
    NetWorthRecord,
    UserRecord,
)
from fintrack.infrastructure.mappers import (
    entry_from_row,
    entry_to_row,
    record_from_row,
    record_to_row,
    user_from_row,
    user_to_row,
)


class TableEntriesRepository(EntriesRepositoryPort):
    """Assets or debts stored in one remote table."""

    def __init__(self, gateway: TableGatewayPort, kind: EntryKind) -> None:
        self._gateway = gateway
        self.kind = kind

    def list_entries(self) -> list[FinancialEntry]:
        rows = self._gateway.select_rows(order_by="name")
        return [entry_from_row(row) for row in rows]

    def add_entry(self, entry: FinancialEntry) -> FinancialEntry | None:
        row = self._gateway.insert_row(entry_to_row(entry))
        return entry_from_row(row) if row else None

    def update_entry(self, entry: FinancialEntry) -> FinancialEntry | None:
        updates = entry_to_row(entry)
        updates.pop("id")
        row = self._gateway.update_row(entry.id, updates)
        return entry_from_row(row) if row else None

    def delete_entry(self, entry_id: str) -> None:
        self._gateway.delete_row(entry_id)


class TableNetWorthHistoryRepository(NetWorthHistoryRepositoryPort):
    """Net worth snapshots stored in ``net_worth_history``."""

    def __init__(self, gateway: TableGatewayPort) -> None:
        self._gateway = gateway

    def list_records(self, limit: int | None = None) -> list[NetWorthRecord]:
        rows = self._gateway.select_rows(
            order_by="date",
            descending=True,
            limit=limit,
        )
        return [record_from_row(row) for row in rows]

    def add_record(self, record: NetWorthRecord) -> NetWorthRecord | None:
        row = self._gateway.insert_row(record_to_row(record))
        return record_from_row(row) if row else None


class TableUsersRepository(UsersRepositoryPort):
    """Mirrored identities stored in ``users``."""

    def __init__(self, gateway: TableGatewayPort) -> None:
        self._gateway = gateway

    def get_user(self, user_id: str) -> UserRecord | None:
        row = self._gateway.find_row("id", user_id)
        return user_from_row(row) if row else None

    def add_user(self, user: UserRecord) -> None:
        self._gateway.insert_row(user_to_row(user))


__all__ = [
    "TableEntriesRepository",
    "TableNetWorthHistoryRepository",
    "TableUsersRepository",
]
