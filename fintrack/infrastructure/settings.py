"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from fintrack.domain.constants import AVAILABLE_CURRENCIES
from fintrack.infrastructure.logging.logger import get_app_logger

DEFAULT_EXCHANGE_RATE_API_URL = "https://open.er-api.com/v6/latest/USD"
SUPPORTED_BACKENDS = ("supabase", "sqlalchemy")


@dataclass(frozen=True)
class FinTrackSettings:
    """Runtime configuration sourced from the environment.

    Attributes:
        data_backend: Table backend identifier (supabase or sqlalchemy).
        supabase_url: Supabase project URL.
        supabase_key: Supabase anon key.
        database_url: Postgres URL for the sqlalchemy backend.
        exchange_rate_api_url: Endpoint returning USD-based rates.
        exchange_rate_timeout: Request timeout for the rate API, in seconds.
        exchange_rate_refresh_seconds: Minimum age before rates are refetched.
        default_currency: Display currency selected on first load.
    """

    data_backend: str = "supabase"
    supabase_url: str | None = None
    supabase_key: str | None = None
    database_url: str | None = None
    exchange_rate_api_url: str = DEFAULT_EXCHANGE_RATE_API_URL
    exchange_rate_timeout: float = 10.0
    exchange_rate_refresh_seconds: int = 3600
    default_currency: str = AVAILABLE_CURRENCIES[0].code

    @classmethod
    def from_env(cls) -> "FinTrackSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            FinTrackSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("FINTRACK_DATA_BACKEND", "supabase").strip().lower()
        currency = (
            os.getenv("FINTRACK_DEFAULT_CURRENCY", cls.default_currency)
            .strip()
            .upper()
        )
        known_codes = [item.code for item in AVAILABLE_CURRENCIES]
        if currency not in known_codes:
            logger.warning(
                f"Unsupported FINTRACK_DEFAULT_CURRENCY={currency}; "
                f"using {cls.default_currency}"
            )
            currency = cls.default_currency
        return cls(
            data_backend=backend,
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_key=os.getenv("SUPABASE_KEY") or None,
            database_url=os.getenv("DATABASE_URL") or None,
            exchange_rate_api_url=os.getenv(
                "EXCHANGE_RATE_API_URL",
                DEFAULT_EXCHANGE_RATE_API_URL,
            ),
            exchange_rate_timeout=cls._read_number(
                "EXCHANGE_RATE_TIMEOUT",
                cls.exchange_rate_timeout,
                float,
                logger,
            ),
            exchange_rate_refresh_seconds=cls._read_number(
                "EXCHANGE_RATE_REFRESH_SECONDS",
                cls.exchange_rate_refresh_seconds,
                int,
                logger,
            ),
            default_currency=currency,
        )

    def require_supabase(self) -> tuple[str, str]:
        """Return the Supabase URL and key or raise when missing.

        Raises:
            RuntimeError: If either variable is unset.
        """
        if not self.supabase_url:
            raise RuntimeError("Missing environment variable: SUPABASE_URL")
        if not self.supabase_key:
            raise RuntimeError("Missing environment variable: SUPABASE_KEY")
        return self.supabase_url, self.supabase_key

    @staticmethod
    def _read_number(name: str, default, cast, logger):
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = cast(raw)
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value <= 0:
            logger.warning(f"Non-positive {name}={raw!r}; using {default}")
            return default
        return value


__all__ = [
    "FinTrackSettings",
    "DEFAULT_EXCHANGE_RATE_API_URL",
    "SUPPORTED_BACKENDS",
]
