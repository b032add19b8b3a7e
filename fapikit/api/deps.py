"""FastAPI dependency injection for the app-scoped token session."""

from fastapi import Request

from fapikit.oidc.session import TokenSession


def get_token_session(request: Request) -> TokenSession:
    """Return the TokenSession stored on the application state."""
    return request.app.state.token_session
