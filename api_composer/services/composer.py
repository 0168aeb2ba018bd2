"""
Composer service: one submission from raw input to Outcome.

Build the request, short-circuit on a validation error, otherwise send it
and normalize whatever comes back. Errors never escape a submission.
"""

import logging

import httpx

from ..config import Settings, get_settings
from ..exceptions import TransportError, ValidationError
from ..schemas.compose import RequestDescriptor, RequestInput
from ..schemas.outcome import Outcome
from .display import DisplayRegion
from .http_transport import send_request
from .outcome_normalizer import success_outcome, transport_error_outcome, validation_outcome
from .request_builder import build_request


logger = logging.getLogger("api_composer.composer")


def preview(request_input: RequestInput, settings: Settings | None = None) -> RequestDescriptor:
    """
    Build the request a submission would send, without sending it.

    Raises:
        ValidationError: If the body is not valid JSON
    """
    settings = settings or get_settings()
    return build_request(
        request_input,
        settings.base_url,
        auth_supported=settings.auth_supported
    )


async def submit(
    request_input: RequestInput,
    client: httpx.AsyncClient,
    settings: Settings | None = None,
    cookie_header: str | None = None
) -> Outcome:
    """
    Run one submission end to end.

    Args:
        request_input: Raw values from the request form
        client: HTTP client used for the outbound request
        settings: Settings override; the process-wide settings by default
        cookie_header: The submitting caller's own cookies, sent as ambient credentials

    Returns:
        Exactly one Outcome: validation-error, success or transport-error
    """
    try:
        descriptor = preview(request_input, settings)
    except ValidationError as e:
        logger.warning("Rejected %s %s: %s", request_input.method, request_input.path_suffix, e.detail)
        return validation_outcome(e)

    logger.info("Sending %s %s", descriptor.method, descriptor.url)

    try:
        response = await send_request(descriptor, client, cookie_header)
    except TransportError as e:
        logger.warning("Request %s %s failed: %s", descriptor.method, descriptor.url, e.detail)
        return transport_error_outcome(e.detail, payload=e.payload, has_payload=e.has_payload)

    logger.info("Request %s %s succeeded with status %s", descriptor.method, descriptor.url, response.status_code)
    return success_outcome(response.payload)


async def submit_to_region(
    region: DisplayRegion,
    request_input: RequestInput,
    client: httpx.AsyncClient,
    settings: Settings | None = None,
    cookie_header: str | None = None
) -> Outcome:
    """
    Run a submission whose result is shown in ``region``.

    The region is cleared before the request is built. The outcome is
    returned either way, but only written to the region if no newer
    submission started in the meantime.
    """
    ticket = region.begin()
    outcome = await submit(request_input, client, settings, cookie_header)
    region.resolve(ticket, outcome)
    return outcome
