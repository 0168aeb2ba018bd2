"""
Request composition API routes.

Provides endpoints for submitting a composed request, previewing the request
that would be sent, and reading the form configuration.
"""

import httpx
from fastapi import APIRouter, Depends, Header

from ..config import Settings, get_settings
from ..exceptions import ErrorResponse
from ..http_client import get_http_client
from ..schemas.compose import (
    HTTP_METHODS,
    RETRIEVAL_METHODS,
    ComposerConfig,
    FormDefaults,
    RequestDescriptor,
    RequestInput,
)
from ..schemas.outcome import Outcome
from ..services.composer import preview, submit


router = APIRouter(prefix="/api/compose", tags=["compose"])


# Initial form values
DEFAULT_METHOD = "POST"
DEFAULT_PATH_SUFFIX = "/user/login"
DEFAULT_RAW_BODY = '{\n  "userName": "testuser",\n  "password": "testpassword"\n}'


@router.get("/config", response_model=ComposerConfig)
def get_config(settings: Settings = Depends(get_settings)):
    """
    Get the read-only composer configuration.

    Returns the fixed base URL, the selectable methods, which of them take
    no body, whether the auth fields are offered, and the form defaults.
    """
    return ComposerConfig(
        base_url=settings.base_url,
        methods=list(HTTP_METHODS),
        retrieval_methods=sorted(RETRIEVAL_METHODS),
        auth_supported=settings.auth_supported,
        defaults=FormDefaults(
            method=DEFAULT_METHOD,
            path_suffix=DEFAULT_PATH_SUFFIX,
            raw_body=DEFAULT_RAW_BODY
        )
    )


@router.post(
    "/preview",
    response_model=RequestDescriptor,
    response_model_exclude_unset=True,
    responses={
        422: {"model": ErrorResponse, "description": "Request body is not valid JSON"},
    }
)
def preview_request(
    request: RequestInput,
    settings: Settings = Depends(get_settings)
):
    """
    Build the request a submission would send, without sending it.

    The body field is omitted for methods that carry no body.

    Raises:
        ValidationError: 422 if the request body is not valid JSON
    """
    return preview(request, settings)


@router.post("", response_model=Outcome)
async def submit_request(
    request: RequestInput,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
    cookie: str | None = Header(default=None)
):
    """
    Compose, send and normalize one request.

    Always answers 200: validation errors and failed requests are reported
    through the outcome's ``kind`` rather than the HTTP status.

    Args:
        request: Raw values from the request form
        client: HTTP client for this submission
        settings: Application settings
        cookie: The caller's Cookie header, forwarded upstream

    Returns:
        The Outcome of the submission
    """
    return await submit(request, client, settings, cookie_header=cookie)
