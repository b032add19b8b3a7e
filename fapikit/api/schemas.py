"""Pydantic request/response schemas with camelCase JSON names."""

from pydantic import BaseModel, ConfigDict, Field

from fapikit.core.settings import EndpointSettings
from fapikit.crypto.types import GeneratedBundle
from fapikit.oidc.recipes import build_recipes


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase for JSON serialization."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class GenerateRequest(_CamelModel):
    """Request body for POST /tokens."""

    client_id: str = ""
    private_key: str = Field(default="", repr=False)
    access_token: str | None = Field(default=None, repr=False)


class RecipeResponse(_CamelModel):
    """One endpoint call a bundle is meant for."""

    name: str
    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    form_params: dict[str, str] = Field(default_factory=dict)


class BundleResponse(_CamelModel):
    """Response for POST /tokens and GET /tokens."""

    client_assertion: str
    par_dpop: str
    token_dpop: str
    userinfo_dpop: str
    dpop_public_jwk: str
    dpop_jkt: str
    issued_at: int
    expires_at: int
    recipes: list[RecipeResponse] = Field(default_factory=list)

    @classmethod
    def from_bundle(
        cls,
        bundle: GeneratedBundle,
        settings: EndpointSettings,
        access_token: str | None = None,
    ) -> "BundleResponse":
        recipes = [
            RecipeResponse.model_validate(r.model_dump())
            for r in build_recipes(bundle, settings, access_token)
        ]
        return cls(**bundle.model_dump(), recipes=recipes)


class ErrorResponse(BaseModel):
    """OAuth-style error body."""

    error: str
    error_description: str | None = None
