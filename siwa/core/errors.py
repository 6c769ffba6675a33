"""Exception hierarchy for Sign in with Apple operations."""


class SiwaError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingParameterError(SiwaError):
    """A required caller-supplied value is absent or empty."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"{parameter} is empty")
        self.parameter = parameter


class KeyNotFoundError(SiwaError):
    """The private key path does not resolve to a readable file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Can't find private key at {path}")
        self.path = path


class SigningError(SiwaError):
    """The private key or claims were rejected by the signer."""


class NetworkError(SiwaError):
    """Transport-level failure reaching the provider."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class ProviderError(SiwaError):
    """Token endpoint answer is not a successful JSON object."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error: str | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.body = body


class KeySetError(SiwaError):
    """The published key set is malformed, empty, or has no usable key."""


class InvalidSignatureError(SiwaError):
    """Identity token verification failed."""


class ExpiredTokenError(InvalidSignatureError):
    """Identity token ``exp`` is in the past."""


class MalformedTokenError(InvalidSignatureError):
    """Identity token is not a decodable JWS."""


class InvalidAudienceError(InvalidSignatureError):
    """Identity token ``aud`` does not match the expected client."""


class InvalidIssuerError(InvalidSignatureError):
    """Identity token ``iss`` does not match the expected issuer."""
