"""Shared test fixtures for the Sign in with Apple client."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from httpx import ASGITransport, AsyncClient

from siwa.client import SiwaClient
from siwa.core.settings import ProviderSettings
from siwa.crypto.types import ClientConfig
from stub_provider import StubProvider, write_pem

CLIENT_ID = "com.example.web"
TEAM_ID = "TEAM123456"
KEY_ID = "KEY1234567"
REDIRECT_URI = "https://app.example.com/callback"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SIWA_* variables from the host out of test settings."""
    for name in (
        "SIWA_ENDPOINT_URL",
        "SIWA_DEFAULT_SCOPE",
        "SIWA_DEFAULT_STATE",
        "SIWA_MATCH_KID",
        "SIWA_HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> ProviderSettings:
    return ProviderSettings()


@pytest.fixture
def ec_private_key() -> ec.EllipticCurvePrivateKey:
    """ES256 client signing key."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def ec_key_path(tmp_path: Path, ec_private_key: ec.EllipticCurvePrivateKey) -> Path:
    return write_pem(tmp_path / f"AuthKey_{KEY_ID}.p8", ec_private_key)


@pytest.fixture
def rsa_private_key() -> rsa.RSAPrivateKey:
    """Provider identity token signing key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def client_config(ec_key_path: Path) -> ClientConfig:
    return ClientConfig(
        client_id=CLIENT_ID,
        team_id=TEAM_ID,
        key_id=KEY_ID,
        private_key_path=ec_key_path,
        redirect_uri=REDIRECT_URI,
    )


@pytest.fixture
def stub() -> StubProvider:
    return StubProvider()


@pytest.fixture
async def http_client(stub: StubProvider) -> AsyncIterator[AsyncClient]:
    """httpx client routed to the stub provider app."""
    transport = ASGITransport(app=stub.build_app())
    async with AsyncClient(transport=transport) as ac:
        yield ac


@pytest.fixture
def siwa_client(settings: ProviderSettings, http_client: AsyncClient) -> SiwaClient:
    return SiwaClient(settings=settings, http_client=http_client)
