"""
HTTP client provisioning for API Composer.

Every submission gets its own httpx.AsyncClient, handed to request handlers
through a FastAPI dependency the same way a database session would be.
Cookies set by the upstream API therefore never outlive one submission.
"""

from typing import AsyncIterator

import httpx


def create_http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """
    Create the client used for outbound requests.

    No timeout is applied; a request in flight runs until the server or the
    network gives up.

    Args:
        transport: Optional transport override (e.g. httpx.MockTransport in tests)

    Returns:
        A new, open AsyncClient
    """
    return httpx.AsyncClient(
        timeout=None,
        follow_redirects=True,
        transport=transport
    )


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    Dependency function for FastAPI to get a per-submission HTTP client.

    Yields a fresh client and ensures it's closed after use.

    Usage:
        @router.post("/compose")
        async def compose(client: httpx.AsyncClient = Depends(get_http_client)):
            ...
    """
    client = create_http_client()
    try:
        yield client
    finally:
        await client.aclose()
