"""Factory helpers to select the table backend."""

from fintrack.application.ports.database import DatabaseEnginePort
from fintrack.application.ports.table_gateway import TableGatewayPort
from fintrack.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from fintrack.infrastructure.logging.logger import get_app_logger
from fintrack.infrastructure.schema import OWNER_COLUMNS, TABLES
from fintrack.infrastructure.settings import FinTrackSettings
from fintrack.infrastructure.sqlalchemy_tables import SqlAlchemyTableGateway
from fintrack.infrastructure.supabase_tables import SupabaseTableGateway


def create_table_gateway(
    table_name: str,
    settings: FinTrackSettings,
    *,
    supabase_client=None,
    db_port: DatabaseEnginePort | None = None,
    owner_id: str | None = None,
    logger=None,
) -> TableGatewayPort:
    """Return a table gateway implementation based on configuration.

    Args:
        table_name: Remote table name (assets, debts, net_worth_history, users).
        settings: Settings selecting the backend.
        supabase_client: Session client, required for the supabase backend.
        db_port: Optional engine port for the sqlalchemy backend.
        owner_id: Signed-in user id, used by the sqlalchemy backend.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        TableGatewayPort: Concrete gateway implementation.
    """
    resolved_logger = logger or get_app_logger()
    if table_name not in TABLES:
        raise ValueError(f"Unknown table: {table_name}")
    backend = settings.data_backend

    if backend == "supabase":
        if supabase_client is None:
            raise RuntimeError("Supabase backend requires a client.")
        return SupabaseTableGateway(supabase_client, table_name)

    if backend == "sqlalchemy":
        if owner_id is None and OWNER_COLUMNS[table_name]:
            resolved_logger.warning(
                f"No signed-in user; {table_name} reads will be empty"
            )
        return SqlAlchemyTableGateway(
            db_port or SqlAlchemyDatabaseEngineAdapter(),
            TABLES[table_name],
            owner_column=OWNER_COLUMNS[table_name],
            owner_id=owner_id,
        )

    raise ValueError(
        "Unsupported data backend: "
        f"{backend}. Expected supabase or sqlalchemy."
    )


__all__ = ["create_table_gateway"]
