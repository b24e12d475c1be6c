"""
Google OAuth utilities.

These helpers build the consent URL and exchange authorization codes for the
token pair that the calendar gateway persists.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from urllib.parse import urlencode

import httpx

from fastapi import status

from calendar_gateway.core.config import GoogleSettings, OAuthSettings
from calendar_gateway.models.oauth import StoredOAuthToken


class OAuthTokenExchangeError(Exception):
    """Raised when the token endpoint returns an error."""


class OAuthTokenNotFoundError(Exception):
    """Raised when no persisted OAuth token is available."""


class GoogleOAuthClient:
    """Build Google authorization URLs and exchange authorization codes."""

    AUTH_BASE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
    TOKEN_URL = "https://oauth2.googleapis.com/token"

    def __init__(self, google_settings: GoogleSettings, oauth_settings: OAuthSettings) -> None:
        self._google = google_settings
        self._oauth = oauth_settings

    @property
    def scopes(self) -> list[str]:
        return list(self._oauth.scopes)

    def build_authorization_url(self) -> str:
        """Construct the Google OAuth consent URL."""
        params = {
            "client_id": self._google.client_id,
            "redirect_uri": str(self._google.redirect_uri),
            "response_type": "code",
            "scope": " ".join(self._oauth.scopes),
            "access_type": "offline",
        }
        query = urlencode(params)
        return f"{self.AUTH_BASE_URL}?{query}"

    async def exchange_authorization_code(self, code: str) -> StoredOAuthToken:
        """
        Exchange an authorization code for tokens.

        Google only returns a refresh token on the first consent for a client,
        so ``refresh_token`` may be absent from the result.
        """
        payload = {
            "code": code,
            "client_id": self._google.client_id,
            "client_secret": self._google.client_secret,
            "redirect_uri": str(self._google.redirect_uri),
            "grant_type": "authorization_code",
        }

        issued_at = datetime.now(timezone.utc)
        async with httpx.AsyncClient(timeout=10.0) as client:
            response = await client.post(self.TOKEN_URL, data=payload)

        if response.status_code != status.HTTP_200_OK:
            raise OAuthTokenExchangeError(response.text)

        token_payload = response.json()
        access_token = token_payload.get("access_token")
        if not access_token:
            raise OAuthTokenExchangeError("Incomplete token payload returned from Google.")

        expires_in = token_payload.get("expires_in")
        expiry = issued_at + timedelta(seconds=int(expires_in)) if expires_in else None

        return StoredOAuthToken(
            access_token=access_token,
            refresh_token=token_payload.get("refresh_token"),
            expiry=expiry,
            scope=token_payload.get("scope"),
            token_type=token_payload.get("token_type"),
        )


__all__ = [
    "GoogleOAuthClient",
    "OAuthTokenExchangeError",
    "OAuthTokenNotFoundError",
]
