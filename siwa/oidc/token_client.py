"""Authorization code and refresh token exchange at /auth/token."""

import logging
from typing import Any

import httpx

from siwa.core.errors import MissingParameterError, ProviderError
from siwa.core.settings import ProviderSettings
from siwa.crypto.client_secret import mint_client_secret
from siwa.crypto.types import ClientConfig
from siwa.oidc.transport import open_client, read_json_object, send

logger = logging.getLogger(__name__)


async def _post_token_form(
    form: dict[str, str],
    settings: ProviderSettings,
    client: httpx.AsyncClient | None,
) -> dict[str, Any]:
    """POST the form once and return the decoded token response."""
    url = settings.token_url
    async with open_client(client, settings) as http:
        response = await send(http, "POST", url, data=form)

    payload = read_json_object(response)
    if not response.is_success:
        error = payload.get("error") if payload else None
        logger.warning(
            "Token endpoint rejected %s grant: %d %s",
            form["grant_type"],
            response.status_code,
            error or "",
        )
        raise ProviderError(
            f"Token endpoint returned HTTP {response.status_code}"
            + (f": {error}" if error else ""),
            status_code=response.status_code,
            error=error if isinstance(error, str) else None,
            body=response.text,
        )
    if payload is None:
        raise ProviderError(
            "Token endpoint returned a body that is not a JSON object",
            status_code=response.status_code,
            body=response.text,
        )
    return payload


async def exchange_code(
    code: str,
    config: ClientConfig,
    settings: ProviderSettings,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Exchange an authorization code for tokens."""
    config.require("client_id", "redirect_uri")
    if not code:
        raise MissingParameterError("code")

    form = {
        "client_id": config.client_id or "",
        "client_secret": mint_client_secret(config, settings),
        "code": code,
        "grant_type": "authorization_code",
        "redirect_uri": config.redirect_uri or "",
    }
    return await _post_token_form(form, settings, client)


async def exchange_refresh_token(
    refresh_token: str,
    config: ClientConfig,
    settings: ProviderSettings,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Exchange a refresh token for a new access token.

    Unlike ``exchange_code``, ``redirect_uri`` is not required here.
    """
    config.require("client_id")
    if not refresh_token:
        raise MissingParameterError("refresh_token")

    form = {
        "client_id": config.client_id or "",
        "client_secret": mint_client_secret(config, settings),
        "refresh_token": refresh_token,
        "grant_type": "refresh_token",
    }
    return await _post_token_form(form, settings, client)
