"""Expose constructed client wrappers."""

from .google_auth import GoogleOAuthClient
from .google_calendar import GoogleCalendarClient
from .token_store import CredentialStore, FileCredentialStore, SQLiteCredentialStore

__all__ = [
    "CredentialStore",
    "FileCredentialStore",
    "GoogleCalendarClient",
    "GoogleOAuthClient",
    "SQLiteCredentialStore",
]
