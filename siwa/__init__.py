"""Client-side Sign in with Apple: authorize URL, token exchange, id token checks."""

from siwa.client import SiwaClient
from siwa.core.errors import (
    ExpiredTokenError,
    InvalidAudienceError,
    InvalidIssuerError,
    InvalidSignatureError,
    KeyNotFoundError,
    KeySetError,
    MalformedTokenError,
    MissingParameterError,
    NetworkError,
    ProviderError,
    SigningError,
    SiwaError,
)
from siwa.core.settings import ProviderSettings
from siwa.crypto.types import ClientConfig, IdTokenClaims

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ExpiredTokenError",
    "IdTokenClaims",
    "InvalidAudienceError",
    "InvalidIssuerError",
    "InvalidSignatureError",
    "KeyNotFoundError",
    "KeySetError",
    "MalformedTokenError",
    "MissingParameterError",
    "NetworkError",
    "ProviderError",
    "ProviderSettings",
    "SigningError",
    "SiwaClient",
    "SiwaError",
]
