"""Table gateway backed by a direct SQLAlchemy connection.

Without the hosted API's row-level security, this gateway scopes every
statement to the owner itself: reads filter on the owner column and writes
stamp it.
"""

from typing import Any
from uuid import uuid4

from sqlalchemy import Table, delete, insert, select, update

from fintrack.application.ports.database import DatabaseEnginePort
from fintrack.application.ports.table_gateway import Row, TableGatewayPort
from fintrack.domain.errors import AuthenticationRequiredError


class SqlAlchemyTableGateway(TableGatewayPort):
    """TableGatewayPort implementation over one SQLAlchemy Core table."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        table: Table,
        owner_column: str | None = None,
        owner_id: str | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            db_port: Port providing access to the finance engine.
            table: Table definition to operate on.
            owner_column: Column rows are scoped on, or None for no scoping.
            owner_id: Identity of the signed-in user.
        """
        self._db_port = db_port
        self._table = table
        self._owner_column = owner_column
        self._owner_id = owner_id
        self.table_name = table.name

    def select_rows(
        self,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Row]:
        stmt = self._scoped(select(self._table))
        if order_by:
            column = self._table.c[order_by]
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(row) for row in rows]

    def find_row(self, column: str, value: Any) -> Row | None:
        stmt = self._scoped(
            select(self._table).where(self._table.c[column] == value)
        ).limit(1)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

    def insert_row(self, payload: Row) -> Row | None:
        values = self._known_columns(payload)
        if not values.get("id"):
            values["id"] = str(uuid4())
        if self._owner_column:
            values[self._owner_column] = self._require_owner()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(insert(self._table).values(**values))
        return self.find_row("id", values["id"])

    def update_row(self, row_id: str, updates: Row) -> Row | None:
        values = self._known_columns(updates)
        values.pop("id", None)
        if self._owner_column:
            values[self._owner_column] = self._require_owner()
        stmt = self._scoped(
            update(self._table).where(self._table.c.id == row_id)
        ).values(**values)
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(stmt)
        return self.find_row("id", row_id)

    def delete_row(self, row_id: str) -> None:
        if self._owner_column:
            self._require_owner()
        stmt = self._scoped(
            delete(self._table).where(self._table.c.id == row_id)
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(stmt)

    def _scoped(self, stmt):
        if not self._owner_column:
            return stmt
        return stmt.where(
            self._table.c[self._owner_column] == self._owner_id
        )

    def _known_columns(self, payload: Row) -> Row:
        return {
            key: value
            for key, value in payload.items()
            if key in self._table.c
        }

    def _require_owner(self) -> str:
        if not self._owner_id:
            raise AuthenticationRequiredError(
                f"Writing to {self.table_name} requires a signed-in user"
            )
        return self._owner_id


__all__ = ["SqlAlchemyTableGateway"]
