"""Service layer exports."""

from .calendar_auth import CalendarAuthService
from .google_tokens import GoogleTokenService
from .token_cipher import TokenCipherService

__all__ = [
    "CalendarAuthService",
    "GoogleTokenService",
    "TokenCipherService",
]
