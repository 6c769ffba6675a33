"""Type definitions for client configuration, JWKS, and JWT claims."""

from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, PrivateAttr

from siwa.core.errors import MissingParameterError


class ClientConfig(BaseModel):
    """Caller-supplied client registration values.

    Every field is optional here; each operation checks the ones it needs.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str | None = None
    team_id: str | None = None
    key_id: str | None = None
    private_key_path: str | Path | None = None
    redirect_uri: str | None = None
    scope: str | None = None
    state: str | None = None

    def require(self, *fields: str) -> None:
        """Raise MissingParameterError for the first absent or empty field."""
        for field in fields:
            if not getattr(self, field):
                raise MissingParameterError(field)


class ClientSecretClaims(BaseModel):
    """Claim set of the ES256 client assertion."""

    iss: str
    iat: int
    exp: int
    aud: str
    sub: str


class JWKEntry(BaseModel):
    """Single JWK entry in a JWKS response."""

    model_config = ConfigDict(extra="allow")

    kty: str = "RSA"
    kid: str | None = None
    use: str | None = None
    alg: str | None = None
    n: str
    e: str


class JWKSResponse(BaseModel):
    """JSON Web Key Set response."""

    keys: list[JWKEntry]


class IdTokenClaims(BaseModel):
    """Decoded and verified identity token claims.

    Typed access to the common claims; ``raw`` is the claim set exactly as
    the provider signed it.
    """

    model_config = ConfigDict(extra="allow")

    iss: str | None = None
    sub: str | None = None
    aud: str | list[str] | None = None
    iat: int | float | None = None
    exp: int | float | None = None
    email: str | None = None
    nonce: str | None = None

    _raw: dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Self:
        """Validate a decoded payload and keep an untouched copy of it."""
        claims = cls.model_validate(payload)
        claims._raw = dict(payload)
        return claims

    @property
    def raw(self) -> dict[str, Any]:
        return dict(self._raw)
