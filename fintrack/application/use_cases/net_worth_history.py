"""Use case for reading and appending net worth snapshots."""

from fintrack.application.ports.repositories import (
    NetWorthHistoryRepositoryPort,
)
from fintrack.domain.models import NetWorthRecord
from fintrack.infrastructure.logging.logger import get_app_logger


class NetWorthHistoryUseCase:
    """Access the append-only net worth history."""

    def __init__(
        self,
        repository: NetWorthHistoryRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def get_history(self) -> list[NetWorthRecord]:
        """Return all snapshots, newest first."""
        records = self._repository.list_records()
        self._logger.info(f"Fetched {len(records)} net worth records")
        return records

    def add_record(self, record: NetWorthRecord) -> NetWorthRecord | None:
        """Append a snapshot."""
        return self._repository.add_record(record)

    def get_latest(self) -> NetWorthRecord | None:
        """Return the most recent snapshot, if any."""
        records = self._repository.list_records(limit=1)
        return records[0] if records else None


__all__ = ["NetWorthHistoryUseCase"]
