"""
HTTP transport service for sending composed requests.

Dispatches a RequestDescriptor with httpx and classifies the result: a 2xx
response is a success, everything else raises TransportError.
"""

import json
from typing import Any

import httpx
from pydantic import BaseModel

from ..exceptions import TransportError
from ..schemas.compose import RequestDescriptor


class TransportResponse(BaseModel):
    """A successful (2xx) response with its decoded body."""
    status_code: int
    payload: Any = None


def decode_payload(response: httpx.Response) -> Any:
    """
    Decode a response body for display.

    JSON bodies are parsed; anything else is returned as text, and an empty
    body decodes to the empty string.

    Args:
        response: The received response

    Returns:
        Parsed JSON value or the raw body text
    """
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


def encode_body(descriptor: RequestDescriptor) -> bytes | None:
    if not descriptor.has_body:
        return None
    return json.dumps(descriptor.body).encode("utf-8")


async def send_request(
    descriptor: RequestDescriptor,
    client: httpx.AsyncClient,
    cookie_header: str | None = None
) -> TransportResponse:
    """
    Send a request and return the decoded success response.

    Cookies stored in the client's jar by earlier responses are never sent.
    The only cookies that go out are the caller's own ``cookie_header``,
    and only when the descriptor asks for credentials.

    Args:
        descriptor: The validated request to send
        client: HTTP client used for this submission
        cookie_header: Raw Cookie header of the submitting caller, if any

    Returns:
        TransportResponse for any 2xx status

    Raises:
        TransportError: On a non-2xx status (with the response payload
            attached) or on any other failure (without payload)
    """
    try:
        request = client.build_request(
            method=descriptor.method,
            url=descriptor.url,
            headers=descriptor.headers,
            content=encode_body(descriptor)
        )
        request.headers.pop("Cookie", None)
        if descriptor.include_credentials and cookie_header:
            request.headers["Cookie"] = cookie_header
        response = await client.send(request)
    except httpx.TimeoutException as e:
        raise TransportError("Request timed out") from e
    except httpx.ConnectError as e:
        raise TransportError(f"Failed to connect to server: {e}") from e
    except httpx.InvalidURL as e:
        raise TransportError(f"Invalid URL: {e}") from e
    except httpx.HTTPError as e:
        raise TransportError(f"HTTP error occurred: {e}") from e
    except Exception as e:
        raise TransportError(f"An unexpected error occurred: {e}") from e

    payload = decode_payload(response)

    if not response.is_success:
        raise TransportError(
            f"Request failed with status code {response.status_code}",
            status_code=response.status_code,
            payload=payload,
            has_payload=True
        )

    return TransportResponse(status_code=response.status_code, payload=payload)
