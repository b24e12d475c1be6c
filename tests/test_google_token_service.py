from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from calendar_gateway.clients.google_auth import GoogleOAuthClient, OAuthTokenNotFoundError
from calendar_gateway.clients.token_store import FileCredentialStore
from calendar_gateway.models.oauth import StoredOAuthToken
from calendar_gateway.services.google_tokens import GoogleTokenService
from calendar_gateway.services.token_cipher import TokenCipherService


class FakeStore:
    def __init__(self, record: dict | None = None) -> None:
        self.record = record

    def get(self) -> dict | None:
        return self.record

    def put(self, record: dict) -> None:
        self.record = record


def _service(store, google_settings, oauth_settings, cipher=None) -> GoogleTokenService:
    return GoogleTokenService(
        store=store,
        google_settings=google_settings,
        oauth_settings=oauth_settings,
        token_cipher=cipher,
    )


@pytest.mark.asyncio
async def test_save_and_load_preserve_token_values(
    tmp_path: Path, google_settings, oauth_settings
) -> None:
    store = FileCredentialStore(str(tmp_path / "token.json"))
    service = _service(store, google_settings, oauth_settings)
    token = StoredOAuthToken(
        access_token="ya29.a0Af-_/+=access",
        refresh_token="1//0g-refresh/+=",
        expiry=datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc),
        scope="https://www.googleapis.com/auth/calendar",
        token_type="Bearer",
    )

    await service.save(token)
    loaded = service.load()

    assert loaded.access_token == token.access_token
    assert loaded.refresh_token == token.refresh_token
    assert loaded.expiry == token.expiry


@pytest.mark.asyncio
async def test_save_encrypts_token_fields_when_cipher_configured(
    google_settings, oauth_settings
) -> None:
    store = FakeStore()
    cipher = TokenCipherService(secret="secret-key")
    service = _service(store, google_settings, oauth_settings, cipher)

    await service.save(StoredOAuthToken(access_token="plain-access", refresh_token="plain-refresh"))

    assert store.record["access_token"] != "plain-access"
    assert cipher.decrypt(store.record["refresh_token"]) == "plain-refresh"
    assert service.load().access_token == "plain-access"


def test_load_without_record_raises_not_found(google_settings, oauth_settings) -> None:
    service = _service(FakeStore(), google_settings, oauth_settings)

    with pytest.raises(OAuthTokenNotFoundError):
        service.load()


@pytest.mark.parametrize("record", [{"refresh_token": "only-refresh"}, ["not", "a", "dict"]])
def test_load_rejects_malformed_record(record, google_settings, oauth_settings) -> None:
    service = _service(FakeStore(record), google_settings, oauth_settings)

    with pytest.raises(ValueError):
        service.load()


@pytest.mark.asyncio
async def test_get_credentials_builds_refreshable_credentials(
    google_settings, oauth_settings
) -> None:
    expiry = datetime.now(timezone.utc) + timedelta(hours=1)
    store = FakeStore(
        {
            "access_token": "stored-access",
            "refresh_token": "stored-refresh",
            "expiry": expiry.isoformat(),
        }
    )
    service = _service(store, google_settings, oauth_settings)

    credentials = await service.get_credentials()

    assert credentials.token == "stored-access"
    assert credentials.refresh_token == "stored-refresh"
    assert credentials.token_uri == GoogleOAuthClient.TOKEN_URL
    assert credentials.client_id == "client"
    assert credentials.client_secret == "secret"
    assert credentials.scopes == ["https://www.googleapis.com/auth/calendar"]
    assert credentials.expiry.tzinfo is None
    assert credentials.expiry == expiry.astimezone(timezone.utc).replace(tzinfo=None)
    assert not credentials.expired


class ThreadRecordingStore(FakeStore):
    def __init__(self, record: dict | None = None) -> None:
        super().__init__(record)
        self.threads: list[int] = []

    def get(self) -> dict | None:
        self.threads.append(threading.get_ident())
        return super().get()

    def put(self, record: dict) -> None:
        self.threads.append(threading.get_ident())
        super().put(record)


@pytest.mark.asyncio
async def test_store_access_runs_off_the_event_loop(google_settings, oauth_settings) -> None:
    store = ThreadRecordingStore()
    service = _service(store, google_settings, oauth_settings)

    await service.save(StoredOAuthToken(access_token="access"))
    await service.get_credentials()

    loop_thread = threading.get_ident()
    assert len(store.threads) == 2
    assert loop_thread not in store.threads
