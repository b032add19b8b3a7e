"""FastAPI application factory for the fapikit token generator."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fapikit.api.routes_tokens import router as tokens_router
from fapikit.core.settings import EndpointSettings, ServiceSettings
from fapikit.oidc.session import TokenSession


def create_app(session: TokenSession | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = ServiceSettings()

    app = FastAPI(
        title="fapikit token generator",
        version="0.1.0",
    )
    app.state.token_session = session or TokenSession(EndpointSettings())

    origins = settings.get_cors_origin_list()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "DELETE"],
            allow_headers=["Content-Type"],
        )

    app.include_router(tokens_router)

    return app
