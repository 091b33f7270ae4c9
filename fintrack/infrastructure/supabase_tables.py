"""Table gateway backed by the Supabase PostgREST client.

Owner scoping is enforced by the project's row-level security policies, so
queries carry no explicit owner filter. API errors raised by the client
propagate unchanged.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from supabase import Client

from fintrack.application.ports.table_gateway import Row, TableGatewayPort


def to_json_value(value: Any) -> Any:
    """Convert Python values to JSON-friendly PostgREST values."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def to_json_row(row: Row) -> Row:
    """Convert every value of a row with :func:`to_json_value`."""
    return {key: to_json_value(value) for key, value in row.items()}


class SupabaseTableGateway(TableGatewayPort):
    """TableGatewayPort implementation over one Supabase table."""

    def __init__(self, client: Client, table_name: str) -> None:
        """Initialize the gateway.

        Args:
            client: Authenticated Supabase client.
            table_name: Remote table name.
        """
        self._client = client
        self.table_name = table_name

    def select_rows(
        self,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Row]:
        query = self._table().select("*")
        if order_by:
            query = query.order(order_by, desc=descending)
        if limit is not None:
            query = query.limit(limit)
        response = query.execute()
        return list(response.data or [])

    def find_row(self, column: str, value: Any) -> Row | None:
        response = (
            self._table()
            .select("*")
            .eq(column, to_json_value(value))
            .limit(1)
            .execute()
        )
        rows = response.data or []
        return rows[0] if rows else None

    def insert_row(self, payload: Row) -> Row | None:
        response = self._table().insert([to_json_row(payload)]).execute()
        rows = response.data or []
        return rows[0] if rows else None

    def update_row(self, row_id: str, updates: Row) -> Row | None:
        response = (
            self._table()
            .update(to_json_row(updates))
            .eq("id", row_id)
            .execute()
        )
        rows = response.data or []
        return rows[0] if rows else None

    def delete_row(self, row_id: str) -> None:
        self._table().delete().eq("id", row_id).execute()

    def _table(self):
        return self._client.table(self.table_name)


__all__ = ["SupabaseTableGateway", "to_json_value", "to_json_row"]
