"""Authorization redirect URL builder."""

from urllib.parse import urlencode

from siwa.core.settings import ProviderSettings
from siwa.crypto.types import ClientConfig


def build_authorization_url(
    config: ClientConfig,
    settings: ProviderSettings,
    *,
    response_mode: str | None = None,
    nonce: str | None = None,
) -> str:
    """Build the /auth/authorize URL the user agent is redirected to."""
    config.require("client_id", "redirect_uri")

    params = [
        ("response_type", "code"),
        ("state", config.state or settings.default_state),
        ("client_id", config.client_id),
        ("redirect_uri", config.redirect_uri),
        ("scope", config.scope or settings.default_scope),
    ]
    if response_mode:
        params.append(("response_mode", response_mode))
    if nonce:
        params.append(("nonce", nonce))
    return f"{settings.authorize_url}?{urlencode(params)}"
