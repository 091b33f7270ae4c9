"""SQLAlchemy Core definitions of the remote tables."""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.engine import Engine

metadata = MetaData()


def _entry_table(name: str) -> Table:
    return Table(
        name,
        metadata,
        Column("id", String(36), primary_key=True),
        Column("user_id", String(36), index=True),
        Column("name", String(100), nullable=False),
        Column("category", String(32), nullable=False),
        Column("value", Numeric(14, 2), nullable=False),
        Column("currency", String(3), nullable=False),
        Column("last_updated", DateTime(timezone=True), nullable=False),
        Column("comments", Text),
    )


assets_table = _entry_table("assets")
debts_table = _entry_table("debts")

net_worth_history_table = Table(
    "net_worth_history",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_id", String(36), index=True),
    Column("date", Date, nullable=False),
    Column("total_assets", Numeric(14, 2), nullable=False),
    Column("total_debts", Numeric(14, 2), nullable=False),
    Column("net_worth", Numeric(14, 2), nullable=False),
    Column("base_currency", String(3), nullable=False),
)

users_table = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(255)),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("last_sign_in_at", DateTime(timezone=True)),
)

TABLES = {
    table.name: table
    for table in (
        assets_table,
        debts_table,
        net_worth_history_table,
        users_table,
    )
}

# Column each table is scoped on; users rows are looked up by id directly.
OWNER_COLUMNS: dict[str, str | None] = {
    "assets": "user_id",
    "debts": "user_id",
    "net_worth_history": "user_id",
    "users": None,
}


def create_schema(engine: Engine) -> None:
    """Create any missing tables."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "assets_table",
    "debts_table",
    "net_worth_history_table",
    "users_table",
    "TABLES",
    "OWNER_COLUMNS",
    "create_schema",
]
