"""Use case wrapping authentication and the users-table mirror."""

from collections.abc import Callable
from datetime import datetime, timezone

from fintrack.application.ports.auth import AuthGatewayPort
from fintrack.application.ports.repositories import UsersRepositoryPort
from fintrack.domain.models import (
    AuthIdentity,
    AuthResult,
    AuthSession,
    UserRecord,
)
from fintrack.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class AuthenticateUseCase:
    """Sign users up, in and out, and mirror identities into ``users``.

    After a successful sign-up or sign-in the identity is copied into the
    users table when it is not there yet. The check and the insert are two
    separate calls; a failure in either is logged and does not fail the
    sign-in. Errors from the auth backend itself propagate.
    """

    def __init__(
        self,
        auth_gateway: AuthGatewayPort,
        users_repository: UsersRepositoryPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            auth_gateway: Port wrapping the hosted auth service.
            users_repository: Port providing the mirrored users table.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
            clock: Optional callable returning the current timestamp.
        """
        self._auth_gateway = auth_gateway
        self._users_repository = users_repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def sign_up(self, email: str, password: str) -> AuthResult:
        """Register a user and mirror the identity."""
        result = self._auth_gateway.sign_up(email, password)
        if result.user is not None:
            self._mirror_user(result.user, email)
            self._usage_logger.info(f"user={result.user.user_id} signed up")
        return result

    def sign_in(self, email: str, password: str) -> AuthResult:
        """Authenticate a user and mirror the identity."""
        result = self._auth_gateway.sign_in(email, password)
        if result.user is not None:
            self._mirror_user(result.user, email)
            self._usage_logger.info(f"user={result.user.user_id} signed in")
        return result

    def sign_out(self) -> None:
        """End the current session."""
        self._auth_gateway.sign_out()
        self._usage_logger.info("user signed out")

    def get_session(self) -> AuthSession | None:
        """Return the current session, if any."""
        return self._auth_gateway.get_session()

    def get_user(self) -> AuthIdentity | None:
        """Return the current user, if any."""
        return self._auth_gateway.get_user()

    def _mirror_user(self, identity: AuthIdentity, email: str) -> None:
        try:
            existing = self._users_repository.get_user(identity.user_id)
            if existing is not None:
                return
            now = self._clock()
            self._users_repository.add_user(
                UserRecord(
                    id=identity.user_id,
                    email=identity.email or email,
                    created_at=now,
                    last_sign_in_at=now,
                )
            )
            self._logger.info(f"Created users row for {identity.user_id}")
        except Exception as exc:
            self._logger.error(f"Error ensuring user record: {exc}")


__all__ = ["AuthenticateUseCase"]
