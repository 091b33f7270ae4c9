"""Supabase client construction."""

from supabase import Client, create_client

from fintrack.infrastructure.settings import FinTrackSettings


def create_supabase_client(settings: FinTrackSettings) -> Client:
    """Create a new Supabase client.

    Each interactive session gets its own client because the client holds
    the signed-in user's tokens.

    Args:
        settings: Settings holding the project URL and anon key.

    Returns:
        Client: Unauthenticated Supabase client.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_KEY is missing.
    """
    url, key = settings.require_supabase()
    return create_client(url, key)


__all__ = ["create_supabase_client"]
