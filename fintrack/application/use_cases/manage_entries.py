"""Use case to list, add, edit and delete assets or debts."""

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

from fintrack.application.ports.repositories import EntriesRepositoryPort
from fintrack.domain.errors import AuthenticationRequiredError
from fintrack.domain.models import EntryKind, FinancialEntry
from fintrack.domain.services.validation import validate_entry_input
from fintrack.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class ManageEntriesUseCase:
    """CRUD over one entry table (assets or debts).

    Writes require an authenticated user id; the owner column is set from it
    so the backend's row-level policy accepts the row. Remote errors are not
    caught here.
    """

    def __init__(
        self,
        repository: EntriesRepositoryPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing access to the entry table.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
            clock: Optional callable returning the current timestamp.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def kind(self) -> EntryKind:
        return self._repository.kind

    def list_entries(self) -> list[FinancialEntry]:
        """Return the current user's entries ordered by name."""
        entries = self._repository.list_entries()
        self._logger.info(
            f"Fetched {len(entries)} {self.kind.table_name}"
        )
        return entries

    def add_entry(
        self,
        user_id: str | None,
        *,
        name: str,
        category: str,
        value,
        currency: str,
        comments: str | None = None,
    ) -> FinancialEntry | None:
        """Validate form fields and insert a new entry.

        Args:
            user_id: Authenticated owner id.
            name: Entry name.
            category: Category code.
            value: Raw amount from the form.
            currency: Currency code.
            comments: Optional notes.

        Returns:
            FinancialEntry | None: The stored entry.

        Raises:
            AuthenticationRequiredError: If no user is signed in.
            ValidationError: If a field is invalid.
        """
        self._require_user(user_id, "add")
        draft = validate_entry_input(
            self.kind,
            name=name,
            category=category,
            value=value,
            currency=currency,
            comments=comments,
        )
        entry = FinancialEntry(
            id=str(uuid4()),
            name=draft.name,
            category=draft.category,
            value=draft.value,
            currency=draft.currency,
            last_updated=self._clock(),
            comments=draft.comments,
            user_id=user_id,
        )
        stored = self._repository.add_entry(entry)
        self._usage_logger.info(
            f"user={user_id} added {self.kind.value} id={entry.id}"
        )
        return stored

    def update_entry(
        self,
        user_id: str | None,
        entry: FinancialEntry,
        *,
        name: str,
        category: str,
        value,
        currency: str,
        comments: str | None = None,
    ) -> FinancialEntry | None:
        """Validate form fields and overwrite an existing entry.

        The id is kept, ``last_updated`` is refreshed and the owner is reset
        to the signed-in user. Last write wins.
        """
        self._require_user(user_id, "edit")
        draft = validate_entry_input(
            self.kind,
            name=name,
            category=category,
            value=value,
            currency=currency,
            comments=comments,
        )
        updated = replace(
            entry,
            name=draft.name,
            category=draft.category,
            value=draft.value,
            currency=draft.currency,
            comments=draft.comments,
            last_updated=self._clock(),
            user_id=user_id,
        )
        stored = self._repository.update_entry(updated)
        self._usage_logger.info(
            f"user={user_id} updated {self.kind.value} id={entry.id}"
        )
        return stored

    def delete_entry(self, user_id: str | None, entry_id: str) -> None:
        """Delete an entry owned by the signed-in user."""
        self._require_user(user_id, "delete")
        self._repository.delete_entry(entry_id)
        self._usage_logger.info(
            f"user={user_id} deleted {self.kind.value} id={entry_id}"
        )

    def _require_user(self, user_id: str | None, action: str) -> None:
        if not user_id:
            self._logger.error("User is not authenticated")
            raise AuthenticationRequiredError(
                f"Please log in to {action} "
                f"{self.kind.plural_label.lower()}"
            )


__all__ = ["ManageEntriesUseCase"]
