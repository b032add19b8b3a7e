"""Client assertion and DPoP proof construction using ES256."""

import json
import time
from collections.abc import Callable
from typing import Any

import jwt
import uuid_utils
from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePrivateKey

from fapikit.core.settings import EndpointSettings
from fapikit.crypto.encoding import sha256_base64url
from fapikit.crypto.errors import SigningError, ValidationError
from fapikit.crypto.keys import load_signing_key
from fapikit.crypto.types import (
    ClientAssertionClaims,
    DPoPProofClaims,
    GeneratedBundle,
    KeyPair,
    TokenRequestContext,
)

SIGNING_ALGORITHM = "ES256"
TOKEN_LIFETIME_SECONDS = 120
CLIENT_ASSERTION_TYP = "JWT"
DPOP_PROOF_TYP = "dpop+jwt"


def _unix_now() -> int:
    return int(time.time())


def _new_jti() -> str:
    return str(uuid_utils.uuid4())


class TokenBuilder:
    """Builds the four signed JWTs of a bundle from one request context.

    The clock and ``jti`` source are collaborators so callers can pin them.
    """

    def __init__(
        self,
        settings: EndpointSettings,
        clock: Callable[[], int] = _unix_now,
        jti_factory: Callable[[], str] = _new_jti,
    ) -> None:
        self._settings = settings
        self._clock = clock
        self._jti_factory = jti_factory

    def build(
        self, context: TokenRequestContext, key_pair: KeyPair
    ) -> GeneratedBundle:
        """Sign a client assertion and three DPoP proofs sharing one iat."""
        if not context.client_id.strip() or not context.signing_key_pem.strip():
            raise ValidationError("Client ID and Private Key are required")

        signing_key = load_signing_key(context.signing_key_pem)
        iat = self._clock()
        exp = iat + TOKEN_LIFETIME_SECONDS
        jwk = key_pair.public_jwk.model_dump()

        assertion = ClientAssertionClaims(
            iss=context.client_id,
            sub=context.client_id,
            aud=self._settings.issuer,
            iat=iat,
            exp=exp,
            jti=self._jti_factory(),
        )
        client_assertion = _sign(
            assertion.model_dump(),
            signing_key,
            {"typ": CLIENT_ASSERTION_TYP},
        )

        dpop_headers = {"typ": DPOP_PROOF_TYP, "jwk": jwk}
        par_dpop = _sign(
            self._proof("POST", self._settings.par_endpoint, iat, exp),
            key_pair.private_key,
            dpop_headers,
        )
        token_dpop = _sign(
            self._proof("POST", self._settings.token_endpoint, iat, exp),
            key_pair.private_key,
            dpop_headers,
        )

        ath = sha256_base64url(context.access_token) if context.access_token else None
        userinfo_dpop = _sign(
            self._proof("GET", self._settings.userinfo_endpoint, iat, exp, ath),
            key_pair.private_key,
            dpop_headers,
        )

        return GeneratedBundle(
            client_assertion=client_assertion,
            par_dpop=par_dpop,
            token_dpop=token_dpop,
            userinfo_dpop=userinfo_dpop,
            dpop_public_jwk=json.dumps(jwk, indent=2),
            dpop_jkt=key_pair.thumbprint,
            issued_at=iat,
            expires_at=exp,
        )

    def _proof(
        self,
        method: str,
        url: str,
        iat: int,
        exp: int,
        ath: str | None = None,
    ) -> dict[str, Any]:
        claims = DPoPProofClaims(
            jti=self._jti_factory(),
            htm=method,
            htu=url,
            iat=iat,
            exp=exp,
            ath=ath,
        )
        return claims.model_dump(exclude_none=True)


def _sign(
    payload: dict[str, Any],
    key: EllipticCurvePrivateKey,
    headers: dict[str, Any],
) -> str:
    try:
        return jwt.encode(
            payload,
            key,
            algorithm=SIGNING_ALGORITHM,
            headers=headers,
        )
    except (jwt.PyJWTError, ValueError, TypeError, NotImplementedError) as exc:
        raise SigningError(f"Failed to sign JWT: {type(exc).__name__}") from exc
