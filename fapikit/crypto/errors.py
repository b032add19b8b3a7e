"""Error kinds raised while generating a token bundle."""


class TokenGenerationError(Exception):
    """Base class for every failure of a generation call."""

    code = "generation_failed"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(TokenGenerationError):
    """Client ID or signing key missing from the request."""

    code = "invalid_request"


class KeyImportError(TokenGenerationError):
    """Signing key is not a P-256 PKCS8 PEM private key."""

    code = "invalid_key"


class SigningError(TokenGenerationError):
    """A JWT could not be signed."""

    code = "signing_failed"


class EntropyError(TokenGenerationError):
    """The DPoP key pair could not be generated."""

    code = "key_generation_failed"
