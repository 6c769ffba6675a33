"""ES256 client assertion used as the token endpoint client_secret."""

import logging
from datetime import UTC, datetime

import jwt

from siwa.core.errors import SigningError
from siwa.core.settings import ProviderSettings
from siwa.crypto.keys import load_private_key
from siwa.crypto.types import ClientConfig, ClientSecretClaims

logger = logging.getLogger(__name__)

CLIENT_SECRET_TTL_SECONDS = 15_777_000
CLIENT_SECRET_ALGORITHM = "ES256"

_REQUIRED_FIELDS = ("client_id", "team_id", "key_id", "private_key_path")


def build_client_secret_claims(
    config: ClientConfig, settings: ProviderSettings, issued_at: int
) -> ClientSecretClaims:
    """Build the assertion claim set for a given issue time."""
    return ClientSecretClaims(
        iss=config.team_id or "",
        iat=issued_at,
        exp=issued_at + CLIENT_SECRET_TTL_SECONDS,
        aud=settings.base_url,
        sub=config.client_id or "",
    )


def mint_client_secret(
    config: ClientConfig,
    settings: ProviderSettings,
    *,
    now: datetime | None = None,
) -> str:
    """Sign a fresh client assertion with the caller's private key."""
    config.require(*_REQUIRED_FIELDS)
    assert config.private_key_path is not None

    issued_at = int((now or datetime.now(UTC)).timestamp())
    claims = build_client_secret_claims(config, settings, issued_at)
    key = load_private_key(config.private_key_path)

    try:
        token = jwt.encode(
            claims.model_dump(),
            key,
            algorithm=CLIENT_SECRET_ALGORITHM,
            headers={"kid": config.key_id},
        )
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise SigningError(f"Could not sign client secret: {exc}") from exc

    logger.debug(
        "Minted client secret for %s (kid=%s, exp=%d)",
        config.client_id,
        config.key_id,
        claims.exp,
    )
    return token
