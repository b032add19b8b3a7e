"""Session facade: one DPoP key pair, many generations, explicit reset."""

import logging

from fapikit.core.settings import EndpointSettings
from fapikit.crypto.errors import TokenGenerationError
from fapikit.crypto.jwt_builder import TokenBuilder
from fapikit.crypto.keys import KeyPairManager
from fapikit.crypto.types import GeneratedBundle, TokenRequestContext

logger = logging.getLogger(__name__)


class TokenSession:
    """Generates token bundles against a session-scoped DPoP key pair."""

    def __init__(
        self,
        settings: EndpointSettings | None = None,
        key_manager: KeyPairManager | None = None,
        builder: TokenBuilder | None = None,
    ) -> None:
        self.settings = settings or EndpointSettings()
        self.key_manager = key_manager or KeyPairManager()
        self.builder = builder or TokenBuilder(self.settings)
        self._bundle: GeneratedBundle | None = None

    @property
    def bundle(self) -> GeneratedBundle | None:
        """The most recent bundle, or None after reset."""
        return self._bundle

    def generate(
        self,
        client_id: str,
        signing_key_pem: str,
        access_token: str | None = None,
    ) -> GeneratedBundle:
        """Build a fresh bundle; the previous one survives a failed call."""
        context = TokenRequestContext(
            client_id=client_id,
            signing_key_pem=signing_key_pem,
            access_token=access_token or None,
        )
        key_pair = self.key_manager.get_or_create()
        try:
            bundle = self.builder.build(context, key_pair)
        except TokenGenerationError as exc:
            logger.warning("Token generation rejected (%s): %s", exc.code, exc.message)
            raise
        self._bundle = bundle
        logger.info(
            "Generated tokens for client %s (jkt=%s, iat=%d, ath=%s)",
            client_id,
            bundle.dpop_jkt,
            bundle.issued_at,
            "yes" if context.access_token else "no",
        )
        return bundle

    def reset(self) -> None:
        """Drop the key pair and the current bundle."""
        self.key_manager.reset()
        self._bundle = None
