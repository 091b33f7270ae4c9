"""Port for the hosted authentication service."""

from typing import Protocol

from fintrack.domain.models import AuthIdentity, AuthResult, AuthSession


class AuthGatewayPort(Protocol):
    """Port wrapping sign-up, sign-in, sign-out and session lookup.

    Implementations raise the backend's own exceptions on failure.
    """

    def sign_up(self, email: str, password: str) -> AuthResult:
        """Register a new user."""

    def sign_in(self, email: str, password: str) -> AuthResult:
        """Authenticate with email and password."""

    def sign_out(self) -> None:
        """End the current session."""

    def get_session(self) -> AuthSession | None:
        """Return the current session, if any."""

    def get_user(self) -> AuthIdentity | None:
        """Return the current user, if any."""


__all__ = ["AuthGatewayPort"]
