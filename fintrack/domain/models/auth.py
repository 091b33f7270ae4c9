"""Domain models for authenticated identities."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AuthIdentity:
    """Authenticated user as reported by the backend."""

    user_id: str
    email: str | None


@dataclass(frozen=True)
class AuthSession:
    """Active session for an authenticated user."""

    access_token: str
    refresh_token: str | None
    user: AuthIdentity
    expires_at: int | None = None


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a sign-up or sign-in call.

    ``session`` is None when the backend requires email confirmation
    before issuing one.
    """

    user: AuthIdentity | None
    session: AuthSession | None


@dataclass(frozen=True)
class UserRecord:
    """Mirrored identity row in the users table."""

    id: str
    email: str | None
    created_at: datetime
    last_sign_in_at: datetime | None = None


__all__ = ["AuthIdentity", "AuthSession", "AuthResult", "UserRecord"]
