"""Shared test fixtures for fapikit."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from fapikit.core.app import create_app
from fapikit.crypto.keys import generate_signing_keypair
from fapikit.crypto.types import SigningKeyData

ISSUER = "https://as.example.com/fapi"


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for test settings."""
    monkeypatch.setenv("FAPI_ISSUER_URL", ISSUER)
    monkeypatch.delenv("FAPI_PAR_URL", raising=False)
    monkeypatch.delenv("FAPI_TOKEN_URL", raising=False)
    monkeypatch.delenv("FAPI_USERINFO_URL", raising=False)
    monkeypatch.delenv("FAPIKIT_CORS_ORIGINS", raising=False)


@pytest.fixture
def signing_key() -> SigningKeyData:
    """A fresh P-256 PKCS8 client signing key."""
    return generate_signing_keypair()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create an httpx test client against a fresh app."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
