"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

ISSUER_URL_DEFAULT = "https://stg-id.singpass.gov.sg/fapi"
LOG_LEVEL_DEFAULT = "INFO"


class EndpointSettings(BaseSettings):
    """Authorization-server endpoints the generated tokens target."""

    model_config = SettingsConfigDict(env_prefix="FAPI_")

    issuer_url: str = ISSUER_URL_DEFAULT
    par_url: str = ""
    token_url: str = ""
    userinfo_url: str = ""

    @property
    def issuer(self) -> str:
        """Client assertion audience, without trailing slash."""
        return self.issuer_url.rstrip("/")

    @property
    def par_endpoint(self) -> str:
        return self.par_url or f"{self.issuer}/par"

    @property
    def token_endpoint(self) -> str:
        return self.token_url or f"{self.issuer}/token"

    @property
    def userinfo_endpoint(self) -> str:
        return self.userinfo_url or f"{self.issuer}/userinfo"


class ServiceSettings(BaseSettings):
    """HTTP service and logging settings."""

    model_config = SettingsConfigDict(env_prefix="FAPIKIT_")

    cors_origins: str = ""
    log_level: str = LOG_LEVEL_DEFAULT

    def get_cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins."""
        if not self.cors_origins:
            return []
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
