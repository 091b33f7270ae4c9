"""Auth gateway backed by Supabase Auth."""

from supabase import Client

from fintrack.application.ports.auth import AuthGatewayPort
from fintrack.domain.models import AuthIdentity, AuthResult, AuthSession


class SupabaseAuthGateway(AuthGatewayPort):
    """AuthGatewayPort implementation over ``client.auth``.

    Auth API errors raised by the client propagate unchanged.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def sign_up(self, email: str, password: str) -> AuthResult:
        response = self._client.auth.sign_up(
            {"email": email, "password": password}
        )
        return _to_result(response)

    def sign_in(self, email: str, password: str) -> AuthResult:
        response = self._client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )
        return _to_result(response)

    def sign_out(self) -> None:
        self._client.auth.sign_out()

    def get_session(self) -> AuthSession | None:
        return _to_session(self._client.auth.get_session())

    def get_user(self) -> AuthIdentity | None:
        response = self._client.auth.get_user()
        if response is None:
            return None
        return _to_identity(response.user)


def _to_identity(user) -> AuthIdentity | None:
    if user is None:
        return None
    return AuthIdentity(user_id=str(user.id), email=user.email)


def _to_session(session) -> AuthSession | None:
    if session is None:
        return None
    identity = _to_identity(session.user)
    if identity is None:
        return None
    return AuthSession(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        user=identity,
        expires_at=session.expires_at,
    )


def _to_result(response) -> AuthResult:
    return AuthResult(
        user=_to_identity(response.user),
        session=_to_session(response.session),
    )


__all__ = ["SupabaseAuthGateway"]
