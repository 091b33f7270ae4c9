"""Port for row-level access to a remote table.

Rows travel as plain dictionaries keyed by column name. Implementations are
expected to scope every call to the current owner, either through the
backend's row-level security or by filtering on an owner column.
"""

from typing import Any, Protocol

Row = dict[str, Any]


class TableGatewayPort(Protocol):
    """Port exposing list/insert/update/delete on one remote table."""

    table_name: str

    def select_rows(
        self,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Row]:
        """Return rows visible to the current owner."""

    def find_row(self, column: str, value: Any) -> Row | None:
        """Return the first row where ``column`` equals ``value``."""

    def insert_row(self, payload: Row) -> Row | None:
        """Insert a row and return it as stored."""

    def update_row(self, row_id: str, updates: Row) -> Row | None:
        """Update the row with ``row_id`` and return it as stored."""

    def delete_row(self, row_id: str) -> None:
        """Delete the row with ``row_id``."""


__all__ = ["Row", "TableGatewayPort"]
