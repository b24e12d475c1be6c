"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from functools import lru_cache

from calendar_gateway.clients import (
    CredentialStore,
    FileCredentialStore,
    GoogleCalendarClient,
    GoogleOAuthClient,
    SQLiteCredentialStore,
)
from calendar_gateway.core.config import get_settings
from calendar_gateway.services import (
    CalendarAuthService,
    GoogleTokenService,
    TokenCipherService,
)


@lru_cache()
def _settings():
    """Internal helper to cache settings for client factories."""
    return get_settings()


@lru_cache()
def get_google_oauth_client() -> GoogleOAuthClient:
    """Create a singleton Google OAuth client."""
    settings = _settings()
    return GoogleOAuthClient(settings.google, settings.oauth)


@lru_cache()
def get_calendar_auth_service() -> CalendarAuthService:
    """Provide the process-wide OAuth session."""
    return CalendarAuthService(get_google_oauth_client())


@lru_cache()
def get_calendar_client() -> GoogleCalendarClient:
    """Provide Google Calendar client instance."""
    return GoogleCalendarClient()


@lru_cache()
def get_credential_store() -> CredentialStore:
    """Provide the configured credential store backend."""
    storage = _settings().storage
    if storage.backend == "sqlite":
        return SQLiteCredentialStore(storage.db_path)
    return FileCredentialStore(storage.token_path)


@lru_cache()
def get_token_cipher_service() -> TokenCipherService | None:
    """Provide symmetric encryption helper when a secret is configured."""
    secret = _settings().security.token_encryption_secret
    if not secret:
        return None
    return TokenCipherService(secret=secret)


def get_google_token_service() -> GoogleTokenService:
    """Provide helper for persisting and loading Google OAuth tokens."""
    settings = _settings()
    return GoogleTokenService(
        store=get_credential_store(),
        google_settings=settings.google,
        oauth_settings=settings.oauth,
        token_cipher=get_token_cipher_service(),
    )


__all__ = [
    "get_calendar_auth_service",
    "get_calendar_client",
    "get_credential_store",
    "get_google_oauth_client",
    "get_google_token_service",
    "get_token_cipher_service",
]
