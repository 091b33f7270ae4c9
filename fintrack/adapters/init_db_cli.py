"""CLI to create the FinTrack tables on a Postgres database.

Only needed for the sqlalchemy backend; Supabase projects manage their
schema (and row level security policies) from the dashboard.
"""

from fintrack.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from fintrack.infrastructure.logging.logger import get_app_logger
from fintrack.infrastructure.schema import TABLES, create_schema


def main() -> None:
    """Create any missing tables and report them."""
    logger = get_app_logger()
    engine = SqlAlchemyDatabaseEngineAdapter().get_engine()
    logger.info(f"Finance DB: {engine.url}")

    create_schema(engine)

    print(f"Ensured {len(TABLES)} tables: {', '.join(TABLES)}.")


if __name__ == "__main__":  # pragma: no cover
    main()
