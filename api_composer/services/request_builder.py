"""
Request builder service.

Turns raw form input into a RequestDescriptor without touching the network.
The only failure is a request body that is not well-formed JSON.
"""

import json
from typing import Any

from ..exceptions import ValidationError
from ..schemas.compose import RETRIEVAL_METHODS, RequestDescriptor, RequestInput


CONTENT_TYPE_HEADER = "Content-Type"
AUTHORIZATION_HEADER = "Authorization"
JSON_CONTENT_TYPE = "application/json"
BEARER_SCHEME = "Bearer"
BEARER_PREFIX = BEARER_SCHEME + " "


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_body(raw_body: str) -> Any:
    """
    Parse raw body text as JSON.

    Args:
        raw_body: Body text exactly as typed by the user

    Returns:
        The parsed JSON value (object, array, string, number, bool or None)

    Raises:
        ValidationError: If the text is not well-formed JSON
    """
    try:
        return json.loads(raw_body, parse_constant=_reject_constant)
    except ValueError as e:
        raise ValidationError() from e


def authorization_value(token: str) -> str | None:
    """
    Build the Authorization header value for a token.

    Returns None for a blank token, including one that is only the scheme.
    The ``Bearer `` prefix is added unless the token already carries it,
    so the result always holds the prefix exactly once.

    Example:
        >>> authorization_value("abc123")
        'Bearer abc123'
        >>> authorization_value("Bearer abc123")
        'Bearer abc123'
        >>> authorization_value("Bearer ") is None
        True
    """
    credentials = token.strip()
    while credentials == BEARER_SCHEME or credentials.startswith(BEARER_PREFIX):
        credentials = credentials[len(BEARER_SCHEME):].strip()
    if not credentials:
        return None
    return BEARER_PREFIX + credentials


def build_headers(auth_enabled: bool, auth_token: str) -> dict[str, str]:
    """Assemble the outbound header mapping."""
    headers = {CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE}
    if auth_enabled:
        value = authorization_value(auth_token)
        if value is not None:
            headers[AUTHORIZATION_HEADER] = value
    return headers


def build_request(
    request_input: RequestInput,
    base_url: str,
    auth_supported: bool = True
) -> RequestDescriptor:
    """
    Build a ready-to-send request from raw form input.

    The URL is the plain concatenation of ``base_url`` and the path suffix;
    malformed paths are left for the transport to reject. Retrieval methods
    never carry a body, whatever the body field contains.

    Args:
        request_input: Raw values from the request form
        base_url: Fixed API origin the path suffix is appended to
        auth_supported: Whether the deployment offers the auth fields at all

    Returns:
        The validated RequestDescriptor

    Raises:
        ValidationError: If a body is required and is not valid JSON
    """
    fields: dict[str, Any] = {
        "method": request_input.method,
        "url": base_url + request_input.path_suffix,
        "headers": build_headers(
            auth_supported and request_input.auth_enabled,
            request_input.auth_token
        ),
        "include_credentials": True,
    }

    if request_input.method not in RETRIEVAL_METHODS:
        fields["body"] = parse_body(request_input.raw_body)

    return RequestDescriptor(**fields)
