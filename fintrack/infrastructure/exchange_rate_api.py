"""Exchange rate source backed by a public HTTP rate API."""

from decimal import Decimal

import requests

from fintrack.application.ports.exchange_rates import ExchangeRateSourcePort
from fintrack.domain.errors import ExchangeRateError
from fintrack.domain.services.fx import parse_rates_payload
from fintrack.infrastructure.logging.logger import get_app_logger
from fintrack.infrastructure.settings import DEFAULT_EXCHANGE_RATE_API_URL


class RequestsExchangeRateSource(ExchangeRateSourcePort):
    """Fetch USD-based rates with ``requests``.

    Every transport, HTTP status or decoding failure is reported as
    :class:`ExchangeRateError`.
    """

    def __init__(
        self,
        url: str = DEFAULT_EXCHANGE_RATE_API_URL,
        timeout: float = 10.0,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()
        self._logger = logger or get_app_logger()

    def fetch_rates(self) -> dict[str, Decimal]:
        try:
            response = self._session.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise ExchangeRateError(
                f"Could not fetch exchange rates from {self._url}: {exc}"
            ) from exc
        return parse_rates_payload(payload, self._logger)


__all__ = ["RequestsExchangeRateSource"]
