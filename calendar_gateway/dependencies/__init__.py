"""Expose dependency helpers for FastAPI routers."""

from .clients import (
    get_calendar_auth_service,
    get_calendar_client,
    get_credential_store,
    get_google_oauth_client,
    get_google_token_service,
    get_token_cipher_service,
)

__all__ = [
    "get_calendar_auth_service",
    "get_calendar_client",
    "get_credential_store",
    "get_google_oauth_client",
    "get_google_token_service",
    "get_token_cipher_service",
]
