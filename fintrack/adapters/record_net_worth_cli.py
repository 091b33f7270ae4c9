"""CLI adapter to record a net worth snapshot for one account.

The job signs in with ``FINTRACK_EMAIL``/``FINTRACK_PASSWORD``, refreshes
exchange rates and appends today's totals to the net worth history. It is
meant to be scheduled (cron, CI) so the trend chart fills in over time.
"""

import os
import sys

import dotenv

from fintrack.domain.services.fx import ExchangeRateTable
from fintrack.infrastructure.container import (
    build_authenticate_use_case,
    build_rate_refresher,
    build_settings,
    build_snapshot_use_case,
    build_supabase_client,
)
from fintrack.infrastructure.logging.logger import get_app_logger


def _read_credentials() -> tuple[str, str]:
    dotenv.load_dotenv()
    email = os.getenv("FINTRACK_EMAIL")
    password = os.getenv("FINTRACK_PASSWORD")
    if not email or not password:
        raise RuntimeError(
            "Missing environment variable: FINTRACK_EMAIL or FINTRACK_PASSWORD"
        )
    return email, password


def main(argv: list[str] | None = None) -> None:
    """Sign in, refresh rates and record a snapshot.

    Args:
        argv: Optional arguments; the first one overrides the snapshot
            currency (defaults to ``FINTRACK_DEFAULT_CURRENCY``).
    """
    args = sys.argv[1:] if argv is None else argv
    logger = get_app_logger()
    settings = build_settings()
    currency = args[0].upper() if args else settings.default_currency

    email, password = _read_credentials()
    client = build_supabase_client(settings)
    auth = build_authenticate_use_case(client, settings)
    result = auth.sign_in(email, password)
    if result.user is None:
        raise RuntimeError(f"Sign in failed for {email}")

    rate_table = ExchangeRateTable(logger=logger)
    if not build_rate_refresher(rate_table, settings).execute():
        logger.warning("Recording snapshot with default exchange rates")

    use_case = build_snapshot_use_case(
        client,
        result.user.user_id,
        rate_table,
        settings,
    )
    try:
        record = use_case.execute(result.user.user_id, base_currency=currency)
    finally:
        auth.sign_out()
    if record is None:
        raise RuntimeError(
            "Net worth snapshot was not stored: the backend returned no row"
        )

    print(
        f"Recorded net worth {record.net_worth} {record.base_currency} "
        f"for {record.date.isoformat()}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
