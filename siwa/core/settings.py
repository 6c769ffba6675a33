"""Provider settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

ENDPOINT_URL_DEFAULT = "https://appleid.apple.com"
SCOPE_DEFAULT = "email"
STATE_DEFAULT = "state"

AUTHORIZE_PATH = "/auth/authorize"
TOKEN_PATH = "/auth/token"
KEYS_PATH = "/auth/keys"


class ProviderSettings(BaseSettings):
    """Sign in with Apple provider settings."""

    model_config = SettingsConfigDict(env_prefix="SIWA_")

    endpoint_url: str = ENDPOINT_URL_DEFAULT
    default_scope: str = SCOPE_DEFAULT
    default_state: str = STATE_DEFAULT
    match_kid: bool = False
    http_timeout: float | None = None

    @property
    def base_url(self) -> str:
        """Endpoint URL without a trailing slash."""
        return self.endpoint_url.rstrip("/")

    @property
    def authorize_url(self) -> str:
        return f"{self.base_url}{AUTHORIZE_PATH}"

    @property
    def token_url(self) -> str:
        return f"{self.base_url}{TOKEN_PATH}"

    @property
    def keys_url(self) -> str:
        return f"{self.base_url}{KEYS_PATH}"
