"""Tests for provider settings."""

import pytest

from siwa.core.settings import ProviderSettings


class TestDefaults:
    """Tests for default provider endpoints."""

    def test_default_endpoints(self) -> None:
        settings = ProviderSettings()
        assert settings.endpoint_url == "https://appleid.apple.com"
        assert settings.authorize_url == "https://appleid.apple.com/auth/authorize"
        assert settings.token_url == "https://appleid.apple.com/auth/token"
        assert settings.keys_url == "https://appleid.apple.com/auth/keys"

    def test_default_scope_and_state(self) -> None:
        settings = ProviderSettings()
        assert settings.default_scope == "email"
        assert settings.default_state == "state"
        assert settings.match_kid is False
        assert settings.http_timeout is None

    def test_trailing_slash_stripped(self) -> None:
        settings = ProviderSettings(endpoint_url="http://stub.local/")
        assert settings.base_url == "http://stub.local"
        assert settings.token_url == "http://stub.local/auth/token"


class TestEnvironment:
    """Tests for SIWA_* environment overrides."""

    def test_endpoint_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIWA_ENDPOINT_URL", "http://stub.local")
        assert ProviderSettings().keys_url == "http://stub.local/auth/keys"

    def test_match_kid_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIWA_MATCH_KID", "true")
        assert ProviderSettings().match_kid is True

    def test_explicit_value_wins_over_env(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SIWA_DEFAULT_SCOPE", "name")
        assert ProviderSettings(default_scope="email").default_scope == "email"
