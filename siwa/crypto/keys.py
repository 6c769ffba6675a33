"""Private key loading and JWK to RSA public key conversion."""

import base64
import binascii
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePrivateKey
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from siwa.core.errors import KeyNotFoundError, KeySetError, SigningError
from siwa.crypto.types import JWKEntry, JWKSResponse


def load_private_key(path: str | Path) -> EllipticCurvePrivateKey:
    """Load a PEM-encoded EC private key for ES256 signing."""
    try:
        pem = Path(path).read_bytes()
    except OSError as exc:
        raise KeyNotFoundError(str(path)) from exc

    try:
        loaded = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError) as exc:
        raise SigningError(f"Invalid private key at {path}: {exc}") from exc
    if not isinstance(loaded, EllipticCurvePrivateKey):
        raise SigningError(f"Private key at {path} is not an EC key")
    return loaded


def _base64_to_int(value: str) -> int:
    """Decode base64 (URL-safe or standard, padding optional) to an integer."""
    padded = value + "=" * (-len(value) % 4)
    raw = base64.urlsafe_b64decode(padded.encode("ascii"))
    return int.from_bytes(raw, byteorder="big")


def jwk_to_public_key(entry: JWKEntry) -> RSAPublicKey:
    """Rebuild an RSA public key from a JWK's modulus and exponent."""
    try:
        n = _base64_to_int(entry.n)
        e = _base64_to_int(entry.e)
        return rsa.RSAPublicNumbers(e, n).public_key()
    except (binascii.Error, UnicodeEncodeError, ValueError) as exc:
        raise KeySetError(f"Invalid RSA key components: {exc}") from exc


def select_jwk(keyset: JWKSResponse, kid: str | None = None) -> JWKEntry:
    """Pick the first key, or the one whose kid matches when given."""
    if not keyset.keys:
        raise KeySetError("Key set is empty")
    if kid is None:
        return keyset.keys[0]
    for entry in keyset.keys:
        if entry.kid == kid:
            return entry
    raise KeySetError(f"No key with kid {kid!r} in key set")
