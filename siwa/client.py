"""Sign in with Apple client facade."""

from typing import Any

import httpx

from siwa.core.settings import ProviderSettings
from siwa.crypto.types import ClientConfig, IdTokenClaims
from siwa.oidc.authorize import build_authorization_url
from siwa.oidc.token_client import exchange_code, exchange_refresh_token
from siwa.oidc.verify import verify_id_token


class SiwaClient:
    """Binds provider settings and an optional shared HTTP client.

    Holds no per-call state; every method is safe to call concurrently.
    """

    def __init__(
        self,
        settings: ProviderSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or ProviderSettings()
        self._http_client = http_client

    @property
    def settings(self) -> ProviderSettings:
        return self._settings

    def get_authorization_url(
        self,
        config: ClientConfig,
        *,
        response_mode: str | None = None,
        nonce: str | None = None,
    ) -> str:
        """Return the URL to redirect the user agent to."""
        return build_authorization_url(
            config, self._settings, response_mode=response_mode, nonce=nonce
        )

    async def get_authorization_token(
        self, code: str, config: ClientConfig
    ) -> dict[str, Any]:
        """Exchange an authorization code for tokens."""
        return await exchange_code(code, config, self._settings, self._http_client)

    async def refresh_authorization_token(
        self, refresh_token: str, config: ClientConfig
    ) -> dict[str, Any]:
        """Exchange a refresh token for a new access token."""
        return await exchange_refresh_token(
            refresh_token, config, self._settings, self._http_client
        )

    async def verify_id_token(
        self,
        id_token: str,
        *,
        audience: str | None = None,
        issuer: str | None = None,
        nonce: str | None = None,
    ) -> IdTokenClaims:
        """Verify an identity token against the provider's current key."""
        return await verify_id_token(
            id_token,
            self._settings,
            self._http_client,
            audience=audience,
            issuer=issuer,
            nonce=nonce,
        )
