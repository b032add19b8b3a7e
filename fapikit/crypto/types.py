"""Type definitions for key material, claim sets, and generated bundles."""

from cryptography.hazmat.primitives.asymmetric.ec import (
    EllipticCurvePrivateKey,
    EllipticCurvePublicKey,
)
from pydantic import BaseModel, ConfigDict, Field


class PublicJWK(BaseModel):
    """Public half of a P-256 key in JWK form."""

    model_config = ConfigDict(frozen=True)

    kty: str = "EC"
    crv: str = "P-256"
    x: str
    y: str


class KeyPair(BaseModel):
    """Session DPoP key pair with its cached JWK export and thumbprint."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    private_key: EllipticCurvePrivateKey
    public_key: EllipticCurvePublicKey
    public_jwk: PublicJWK
    thumbprint: str


class SigningKeyData(BaseModel):
    """A freshly generated P-256 client signing key."""

    private_key_pem: str
    public_jwk: PublicJWK
    thumbprint: str


class TokenRequestContext(BaseModel):
    """Caller input for one generation call."""

    client_id: str
    signing_key_pem: str = Field(repr=False)
    access_token: str | None = Field(default=None, repr=False)


class ClientAssertionClaims(BaseModel):
    """Claims of a private_key_jwt client assertion (RFC 7523)."""

    iss: str
    sub: str
    aud: str
    iat: int
    exp: int
    jti: str


class DPoPProofClaims(BaseModel):
    """Claims of a DPoP proof (RFC 9449)."""

    jti: str
    htm: str
    htu: str
    iat: int
    exp: int
    ath: str | None = None


class GeneratedBundle(BaseModel):
    """The artifacts of one generation call."""

    model_config = ConfigDict(frozen=True)

    client_assertion: str
    par_dpop: str
    token_dpop: str
    userinfo_dpop: str
    dpop_public_jwk: str
    dpop_jkt: str
    issued_at: int
    expires_at: int
