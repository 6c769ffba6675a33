"""Identity token verification against the provider's published key."""

import logging

import httpx
import jwt
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from jwt.types import Options
from pydantic import ValidationError

from siwa.core.errors import (
    ExpiredTokenError,
    InvalidAudienceError,
    InvalidIssuerError,
    InvalidSignatureError,
    KeySetError,
    MalformedTokenError,
)
from siwa.core.settings import ProviderSettings
from siwa.crypto.keys import jwk_to_public_key, select_jwk
from siwa.crypto.types import IdTokenClaims, JWKSResponse
from siwa.oidc.transport import open_client, read_json_object, send

logger = logging.getLogger(__name__)

ID_TOKEN_ALGORITHM = "RS256"


async def fetch_key_set(
    settings: ProviderSettings, client: httpx.AsyncClient | None = None
) -> JWKSResponse:
    """GET /auth/keys and parse it as a JSON Web Key Set."""
    url = settings.keys_url
    async with open_client(client, settings) as http:
        response = await send(http, "GET", url)

    if not response.is_success:
        raise KeySetError(f"Key endpoint returned HTTP {response.status_code}")
    payload = read_json_object(response)
    if payload is None:
        raise KeySetError("Key endpoint returned a body that is not a JSON object")
    try:
        return JWKSResponse.model_validate(payload)
    except ValidationError as exc:
        raise KeySetError(f"Malformed key set: {exc}") from exc


def _token_kid(id_token: str) -> str:
    """Read the kid header of an unverified token."""
    try:
        header = jwt.get_unverified_header(id_token)
    except jwt.PyJWTError as exc:
        raise MalformedTokenError(f"Malformed identity token: {exc}") from exc
    kid = header.get("kid")
    if not isinstance(kid, str) or not kid:
        raise MalformedTokenError("Identity token header has no kid")
    return kid


def decode_id_token(
    id_token: str,
    public_key: RSAPublicKey,
    *,
    audience: str | None = None,
    issuer: str | None = None,
) -> IdTokenClaims:
    """Verify an RS256 identity token and return its claims."""
    opts: Options = {}
    if audience is None:
        opts["verify_aud"] = False
    try:
        raw = jwt.decode(
            id_token,
            public_key,
            algorithms=[ID_TOKEN_ALGORITHM],
            audience=audience,
            issuer=issuer,
            options=opts,
        )
    except jwt.ExpiredSignatureError as exc:
        raise ExpiredTokenError("Identity token has expired") from exc
    except jwt.InvalidAudienceError as exc:
        raise InvalidAudienceError(f"Invalid audience: {exc}") from exc
    except jwt.InvalidIssuerError as exc:
        raise InvalidIssuerError(f"Invalid issuer: {exc}") from exc
    except jwt.InvalidSignatureError as exc:
        raise InvalidSignatureError("Identity token signature mismatch") from exc
    except jwt.DecodeError as exc:
        raise MalformedTokenError(f"Malformed identity token: {exc}") from exc
    except jwt.PyJWTError as exc:
        raise InvalidSignatureError(f"Identity token rejected: {exc}") from exc
    try:
        return IdTokenClaims.from_payload(raw)
    except ValidationError as exc:
        raise MalformedTokenError(f"Unexpected identity token claims: {exc}") from exc


async def verify_id_token(
    id_token: str,
    settings: ProviderSettings,
    client: httpx.AsyncClient | None = None,
    *,
    audience: str | None = None,
    issuer: str | None = None,
    nonce: str | None = None,
) -> IdTokenClaims:
    """Fetch the provider key and verify an identity token against it.

    The first published key is used unless ``settings.match_kid`` is set,
    in which case the key whose kid matches the token header is selected.
    Keys are fetched on every call.
    """
    kid = _token_kid(id_token) if settings.match_kid else None
    keyset = await fetch_key_set(settings, client)
    entry = select_jwk(keyset, kid)
    claims = decode_id_token(
        id_token,
        jwk_to_public_key(entry),
        audience=audience,
        issuer=issuer,
    )
    if nonce is not None and claims.nonce != nonce:
        raise InvalidSignatureError("Identity token nonce mismatch")
    logger.debug("Verified identity token for subject %s", claims.sub)
    return claims
