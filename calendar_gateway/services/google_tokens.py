"""
Helpers for persisting and loading the Google OAuth token record.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import timezone
from typing import Optional

from google.oauth2.credentials import Credentials

from calendar_gateway.clients.google_auth import GoogleOAuthClient, OAuthTokenNotFoundError
from calendar_gateway.clients.token_store import CredentialStore
from calendar_gateway.core.config import GoogleSettings, OAuthSettings
from calendar_gateway.models.oauth import StoredOAuthToken
from calendar_gateway.services.token_cipher import TokenCipherService

logger = logging.getLogger(__name__)


class GoogleTokenService:
    """Manages access to the persisted Google OAuth token."""

    _SECRET_FIELDS = ("access_token", "refresh_token")

    def __init__(
        self,
        store: CredentialStore,
        google_settings: GoogleSettings,
        oauth_settings: OAuthSettings,
        token_cipher: Optional[TokenCipherService] = None,
    ) -> None:
        self._store = store
        self._google = google_settings
        self._oauth_settings = oauth_settings
        self._cipher = token_cipher

    async def save(self, token: StoredOAuthToken) -> None:
        """Overwrite the stored record with ``token`` off the event loop."""
        record = token.model_dump(mode="json")
        if self._cipher is not None:
            record = self._cipher.encrypt_fields(record, self._SECRET_FIELDS)
        await asyncio.to_thread(self._store.put, record)
        logger.info("Persisted Google OAuth token record.")

    def load(self) -> StoredOAuthToken:
        """Read the stored record back.

        Raises ``OAuthTokenNotFoundError`` when nothing has been stored yet; a
        malformed record raises ``ValueError`` (pydantic's ``ValidationError``
        included).
        """
        record = self._store.get()
        if record is None:
            raise OAuthTokenNotFoundError("No OAuth token stored.")
        if not isinstance(record, dict):
            raise ValueError("Stored OAuth token is not a JSON object.")
        if self._cipher is not None:
            record = self._cipher.decrypt_fields(record, self._SECRET_FIELDS)
        return StoredOAuthToken.model_validate(record)

    async def get_credentials(self) -> Credentials:
        """Build provider credentials from the stored record."""
        token = await asyncio.to_thread(self.load)

        expiry = token.expiry
        # google-auth compares expiry against a naive UTC timestamp.
        if expiry is not None and expiry.tzinfo is not None:
            expiry = expiry.astimezone(timezone.utc).replace(tzinfo=None)

        return Credentials(
            token=token.access_token,
            refresh_token=token.refresh_token,
            token_uri=GoogleOAuthClient.TOKEN_URL,
            client_id=self._google.client_id,
            client_secret=self._google.client_secret,
            scopes=list(self._oauth_settings.scopes),
            expiry=expiry,
        )


__all__ = ["GoogleTokenService"]
