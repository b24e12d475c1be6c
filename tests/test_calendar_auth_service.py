from __future__ import annotations

import pytest

from calendar_gateway.clients.google_auth import GoogleOAuthClient, OAuthTokenExchangeError
from calendar_gateway.models.oauth import StoredOAuthToken
from calendar_gateway.services.calendar_auth import CalendarAuthService


class DummyOAuthClient:
    def __init__(self) -> None:
        self.codes: list[str] = []

    def build_authorization_url(self) -> str:
        return "https://oauth.example.com/auth?access_type=offline"

    async def exchange_authorization_code(self, code: str) -> StoredOAuthToken:
        self.codes.append(code)
        if code == "bad-code":
            raise OAuthTokenExchangeError("invalid_grant")
        return StoredOAuthToken(access_token=f"access-{code}", refresh_token="refresh")


def test_authorization_url_delegates_to_oauth_client(google_settings, oauth_settings) -> None:
    service = CalendarAuthService(GoogleOAuthClient(google_settings, oauth_settings))

    first = service.get_authorization_url()

    assert "access_type=offline" in first
    assert first == service.get_authorization_url()
    assert not service.is_authenticated


@pytest.mark.asyncio
async def test_exchange_code_sets_credentials() -> None:
    oauth_client = DummyOAuthClient()
    service = CalendarAuthService(oauth_client)

    await service.exchange_code("code-1")

    assert service.is_authenticated
    assert service.credentials.access_token == "access-code-1"


@pytest.mark.asyncio
async def test_second_exchange_is_a_no_op() -> None:
    oauth_client = DummyOAuthClient()
    service = CalendarAuthService(oauth_client)

    await service.exchange_code("code-1")
    await service.exchange_code("bad-code")

    assert oauth_client.codes == ["code-1"]
    assert service.credentials.access_token == "access-code-1"


@pytest.mark.asyncio
async def test_failed_exchange_leaves_service_unauthenticated() -> None:
    oauth_client = DummyOAuthClient()
    service = CalendarAuthService(oauth_client)

    with pytest.raises(OAuthTokenExchangeError):
        await service.exchange_code("bad-code")

    assert not service.is_authenticated
    await service.exchange_code("code-2")
    assert service.credentials.access_token == "access-code-2"
