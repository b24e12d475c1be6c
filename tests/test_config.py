from __future__ import annotations

import pytest

from calendar_gateway.core.config import CALENDAR_SCOPE, AppSettings, OAuthSettings


def test_oauth_defaults_request_calendar_scope(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OAUTH_SCOPES", raising=False)

    assert OAuthSettings().scopes == (CALENDAR_SCOPE,)


def test_scopes_accept_comma_separated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(
        "OAUTH_SCOPES",
        f"{CALENDAR_SCOPE}, https://www.googleapis.com/auth/calendar.events ,",
    )

    assert OAuthSettings().scopes == (
        CALENDAR_SCOPE,
        "https://www.googleapis.com/auth/calendar.events",
    )


def test_app_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("APP_PORT", "TOKEN_STORE_BACKEND", "TOKEN_ENCRYPTION_SECRET"):
        monkeypatch.delenv(key, raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.port == 3000
    assert settings.storage.backend == "file"
    assert settings.security.token_encryption_secret is None
    assert str(settings.google.redirect_uri) == "https://example.com/oauth2callback"
