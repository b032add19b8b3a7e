"""Token generation, inspection, and reset endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from starlette.responses import JSONResponse

from fapikit.api.deps import get_token_session
from fapikit.api.schemas import BundleResponse, ErrorResponse, GenerateRequest
from fapikit.crypto.errors import KeyImportError, TokenGenerationError, ValidationError
from fapikit.oidc.session import TokenSession

router = APIRouter()

HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_SERVER_ERROR = 500


def _error(exc: TokenGenerationError) -> JSONResponse:
    status = (
        HTTP_BAD_REQUEST
        if isinstance(exc, ValidationError | KeyImportError)
        else HTTP_SERVER_ERROR
    )
    body = ErrorResponse(error=exc.code, error_description=exc.message)
    return JSONResponse(body.model_dump(), status_code=status)


@router.post("/tokens", response_model=None)
async def generate_tokens(
    payload: GenerateRequest,
    session: Annotated[TokenSession, Depends(get_token_session)],
) -> BundleResponse | JSONResponse:
    """POST /tokens -- sign a client assertion and three DPoP proofs."""
    try:
        bundle = session.generate(
            payload.client_id,
            payload.private_key,
            payload.access_token,
        )
    except TokenGenerationError as exc:
        return _error(exc)
    return BundleResponse.from_bundle(bundle, session.settings, payload.access_token)


@router.get("/tokens", response_model=None)
async def current_tokens(
    session: Annotated[TokenSession, Depends(get_token_session)],
) -> BundleResponse | JSONResponse:
    """GET /tokens -- return the last generated bundle."""
    if session.bundle is None:
        return JSONResponse({"error": "not_found"}, status_code=HTTP_NOT_FOUND)
    return BundleResponse.from_bundle(session.bundle, session.settings)


@router.delete("/tokens", status_code=204)
async def reset_tokens(
    session: Annotated[TokenSession, Depends(get_token_session)],
) -> Response:
    """DELETE /tokens -- discard the bundle and the DPoP key pair."""
    session.reset()
    return Response(status_code=204)
