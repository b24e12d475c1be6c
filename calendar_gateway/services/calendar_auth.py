"""Process-level OAuth session for the calendar gateway."""

from __future__ import annotations

import logging
from typing import Optional

from calendar_gateway.clients.google_auth import GoogleOAuthClient
from calendar_gateway.models.oauth import StoredOAuthToken

logger = logging.getLogger(__name__)


class CalendarAuthService:
    """Hands out the consent URL and holds the credentials from the first exchange.

    Once a code has been exchanged successfully, later exchanges are no-ops for
    the rest of the process lifetime.
    """

    def __init__(self, oauth_client: GoogleOAuthClient) -> None:
        self._oauth = oauth_client
        self._credentials: Optional[StoredOAuthToken] = None

    @property
    def is_authenticated(self) -> bool:
        return self._credentials is not None

    @property
    def credentials(self) -> Optional[StoredOAuthToken]:
        return self._credentials

    def get_authorization_url(self) -> str:
        return self._oauth.build_authorization_url()

    async def exchange_code(self, code: str) -> None:
        """Exchange ``code`` for tokens unless a session already exists."""
        if self._credentials is not None:
            logger.info("OAuth session already established; ignoring new authorization code.")
            return
        self._credentials = await self._oauth.exchange_authorization_code(code)


__all__ = ["CalendarAuthService"]
