"""Per-endpoint request recipes for pasting a bundle into an HTTP client."""

from pydantic import BaseModel, Field

from fapikit.core.settings import EndpointSettings
from fapikit.crypto.types import GeneratedBundle

CLIENT_ASSERTION_TYPE = "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"
AUTHORIZATION_CODE_PLACEHOLDER = "<authorization code from PAR>"
ACCESS_TOKEN_PLACEHOLDER = "<access_token from TOKEN response>"


class RequestRecipe(BaseModel):
    """Method, URL, headers and form fields for one endpoint call."""

    name: str
    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    form_params: dict[str, str] = Field(default_factory=dict)


def build_recipes(
    bundle: GeneratedBundle,
    settings: EndpointSettings,
    access_token: str | None = None,
) -> list[RequestRecipe]:
    """Describe the PAR, TOKEN and USERINFO requests for a bundle."""
    assertion_params = {
        "client_assertion": bundle.client_assertion,
        "client_assertion_type": CLIENT_ASSERTION_TYPE,
    }
    return [
        RequestRecipe(
            name="par",
            method="POST",
            url=settings.par_endpoint,
            headers={"DPoP": bundle.par_dpop},
            form_params=dict(assertion_params),
        ),
        RequestRecipe(
            name="token",
            method="POST",
            url=settings.token_endpoint,
            headers={"DPoP": bundle.token_dpop},
            form_params={
                "grant_type": "authorization_code",
                "code": AUTHORIZATION_CODE_PLACEHOLDER,
                **assertion_params,
            },
        ),
        RequestRecipe(
            name="userinfo",
            method="GET",
            url=settings.userinfo_endpoint,
            headers={
                "DPoP": bundle.userinfo_dpop,
                "Authorization": f"DPoP {access_token or ACCESS_TOKEN_PLACEHOLDER}",
            },
        ),
    ]
